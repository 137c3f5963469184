import logging

from logging.config import dictConfig
from os import path


logger = logging.getLogger(__name__)

version = '1.0 alpha'
release = '1.0.0a1'

basedir = path.dirname(path.realpath(__file__))
"""
Base directory for the module.

This can be used by modules looking for configuration and data files to be
referenced or copied with a known path relative to the package root.

:rtype: str
"""

class Env:
    """
    rdfnode environment.

    Instances of this class carry the process-wide defaults used by resources
    that are not given an explicit namespace registry.
    """

    def setup(self, config_dir=None, config=None, configure_logging=False):
        """
        Set the environment up.

        This method will warn and not do anything if it has already been
        called in the same runtime environment.

        :param str config_dir: Path to a directory containing the
            configuration ``.yml`` files. If this and ``config`` are omitted,
            the configuration files are read from the default directory defined
            in :py:meth:`~rdfnode.config_parser.parse_config()`.

        :param dict config: Fully-formed configuration as a dictionary. If
            this is provided, ``config_dir`` is ignored. This is useful to
            call ``parse_config()`` separately and modify the configuration
            manually before passing it to the setup.

        :param bool configure_logging: Apply the ``logging`` configuration
            section via :func:`logging.config.dictConfig`. Off by default so
            that the library does not hijack the host application logging.
        """
        if hasattr(self, 'app_globals'):
            logger.warning('The environment is already set up.')
            return

        if not config:
            from .config_parser import parse_config
            config = parse_config(config_dir)

        if configure_logging and config.get('logging'):
            dictConfig(config['logging'])

        self.app_globals = _AppGlobals(config)


    def teardown(self):
        """
        Discard the current app globals.

        The next call to :py:meth:`setup` builds them anew. Mostly useful in
        test suites.
        """
        if hasattr(self, 'app_globals'):
            del self.app_globals


env = Env()
"""
A pox on "globals are evil".

Object for storing global variables. Different environments
(e.g. application, test suite) put the appropriate value in it.

e.g.::

    >>> from rdfnode import env
    >>> env.setup()
    >>> env.app_globals.ns_registry.shorten(
    ...     'http://xmlns.com/foaf/0.1/name')
    'foaf:name'

Or, to load a configuration and modify it before setting up the environment::

    >>> from rdfnode import env
    >>> from rdfnode.config_parser import parse_config
    >>> config = parse_config(config_dir)
    >>> config['namespaces']['ex'] = 'http://example.org/'
    >>> env.setup(config=config)

:rtype: Object
"""


## Private members. Nothing interesting here.

class _AppGlobals:
    """
    Application Globals.

    This class is instantiated and used as a carrier for the shared services
    built from configuration. The instance is assigned to
    :data:`rdfnode.env` by :py:meth:`Env.setup`.
    """
    def __init__(self, config):
        """
        Generate global variables from configuration.
        """
        self._config = config


    @property
    def config(self):
        """
        Global configuration.
        """
        return self._config


    @property
    def ns_registry(self):
        """
        Default namespace registry.

        Lazy loaded because it needs the config to be set up.

        This is an instance of
        :class:`~rdfnode.namespaces.NamespaceRegistry`.
        """
        if not hasattr(self, '_ns_registry'):
            from rdfnode.namespaces import NamespaceRegistry
            self._ns_registry = NamespaceRegistry(
                    self.config.get('namespaces'))

        return self._ns_registry
