import logging

from os import environ, path

import yaml

import rdfnode
from rdfnode.exceptions import ConfigError

logger = logging.getLogger(__name__)

default_config_dir = environ.get(
        'RDFNODE_CONFIG_DIR', path.join(rdfnode.basedir, 'etc.defaults'))
"""
Default configuration directory.

This value falls back to the provided ``etc.defaults`` directory if the
``RDFNODE_CONFIG_DIR`` environment variable is not set.

This value can still be overridden by custom applications by passing the
``config_dir`` value to :func:`parse_config` explicitly.
"""


def _load_section(fname):
    """
    Load a single YAML configuration file.

    A missing or empty file yields an empty dict.

    :param str fname: Path to the ``.yml`` file.

    :rtype: dict
    :raise rdfnode.exceptions.ConfigError: if the file content is not a
        mapping.
    """
    if not path.exists(fname):
        logger.info('Configuration file {} not found. Skipping.'.format(
            fname))
        return {}

    with open(fname, 'r') as fh:
        data = yaml.load(fh, yaml.SafeLoader)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(fname, 'top-level value must be a mapping.')

    return data


def parse_config(config_dir=None):
    """
    Parse configuration from a directory.

    The directory must have the same structure as the one provided in
    ``etc.defaults``, i.e. contain a ``namespaces.yml`` and a
    ``logging.yml`` file. Either may be omitted.

    Core namespaces are not read from here. They are defined in
    :data:`rdfnode.namespaces.core_namespaces` and bound over the custom
    ones by :class:`~rdfnode.namespaces.NamespaceRegistry`.

    :param config_dir: Location on the filesystem of the configuration
        directory. The default is set by the ``RDFNODE_CONFIG_DIR``
        environment variable or, if this is not set, the ``etc.defaults``
        stock directory.

    :rtype: dict
    """
    configs = (
        'logging',
        'namespaces',
    )

    if not config_dir:
        config_dir = default_config_dir

    # This will hold a dict of all configuration values.
    _config = {}

    logger.info('Reading configuration at {}'.format(config_dir))

    for cname in configs:
        _config[cname] = _load_section(path.join(config_dir, f'{cname}.yml'))

    logger.debug('Loaded {} namespace prefixes.'.format(
        len(_config['namespaces'])))

    return _config
