import logging
import pytest

from rdfnode import env
from rdfnode.namespaces import NamespaceRegistry


@pytest.fixture
def ns_registry():
    '''
    Registry with a fixed prefix table.
    '''
    return NamespaceRegistry({
        'ex': 'http://example.org/',
        'exv': 'http://example.org/vocab#',
    })


@pytest.fixture
def clean_env():
    '''
    Set up and tear down the default environment.
    '''
    env.teardown()
    yield env
    env.teardown()


@pytest.fixture(autouse=True)
def disable_logging():
    """Disable logging in all tests."""
    logging.disable(logging.INFO)
