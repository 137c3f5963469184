import logging

import rdflib

from rdflib import Graph
from rdflib.namespace import Namespace, NamespaceManager


logger = logging.getLogger(__name__)

# Core namespace prefixes. These add to and override any user-defined prefixes.
core_namespaces = {
    'dc' : rdflib.namespace.DC,
    'dcterms' : rdflib.namespace.DCTERMS,
    'foaf' : rdflib.namespace.FOAF,
    'owl' : rdflib.namespace.OWL,
    'rdf' : rdflib.namespace.RDF,
    'rdfs' : rdflib.namespace.RDFS,
    'skos' : rdflib.namespace.SKOS,
    'xml' : Namespace('http://www.w3.org/XML/1998/namespace'),
    'xsd' : rdflib.namespace.XSD,
}


class NamespaceRegistry:
    """
    Prefix table used to shorten URIs and to find the namespace a URI
    belongs to.

    The bindings are held by an :class:`rdflib.namespace.NamespaceManager`.
    Lookups are pure: an unmapped URI never raises, it yields ``None`` or the
    URI itself.

    >>> reg = NamespaceRegistry({'ex': 'http://example.org/'})
    >>> reg.shorten('http://example.org/alice')
    'ex:alice'
    >>> reg.namespace_of_uri('http://xmlns.com/foaf/0.1/Person')
    'foaf'
    >>> reg.shorten('urn:nowhere')
    'urn:nowhere'
    """
    def __init__(self, namespaces=None, core=True):
        """
        Bind prefixes.

        :param dict namespaces: Custom mapping of prefix to namespace URI.
        :param bool core: Whether to bind the core prefixes. Core prefixes
            are bound last so they override custom ones with the same name
            or URI.
        """
        self.ns_mgr = NamespaceManager(
                Graph(), bind_namespaces='core' if core else 'none')
        self._refresh()

        for pfx, uri in (namespaces or {}).items():
            self.bind(pfx, uri)
        if core:
            for pfx, uri in core_namespaces.items():
                self.bind(pfx, uri)


    def bind(self, prefix, uri):
        """
        Bind a prefix to a namespace URI.

        An existing binding for either the prefix or the URI is replaced.

        :param str prefix: Namespace prefix, e.g. ``foaf``.
        :param str uri: Namespace URI, e.g. ``http://xmlns.com/foaf/0.1/``.
        """
        logger.debug('Binding prefix {} to {}.'.format(prefix, uri))
        self.ns_mgr.bind(
                prefix, Namespace(str(uri)), override=True, replace=True)
        self._refresh()


    def _refresh(self):
        # Longest namespaces first, so that the most specific one matches.
        self._lookup = sorted(
                ((pfx, str(ns)) for pfx, ns in self.ns_mgr.namespaces()),
                key=lambda x: len(x[1]), reverse=True)


    def get(self, prefix):
        """
        Namespace bound to a prefix.

        :rtype: rdflib.Namespace or None
        """
        for pfx, ns in self._lookup:
            if pfx == prefix:
                return Namespace(ns)

        return None


    def prefixes(self):
        """
        All bound prefixes, sorted.

        :rtype: list(str)
        """
        return sorted(pfx for pfx, ns in self._lookup)


    def namespaces(self):
        """
        Mapping of all bound prefixes to their namespaces.

        :rtype: dict
        """
        return {pfx: Namespace(ns) for pfx, ns in sorted(self._lookup)}


    def _match(self, uri):
        uri = str(uri)
        for pfx, ns in self._lookup:
            if uri.startswith(ns):
                return pfx, ns, uri[len(ns):]

        return None


    def namespace_of_uri(self, uri):
        """
        Prefix of the namespace that a URI is part of.

        :param str uri: Full URI.

        :rtype: str or None
        :return: The prefix of the longest bound namespace the URI starts
            with, or ``None`` if there is none.
        """
        match = self._match(uri)

        return match[0] if match else None


    def shorten(self, uri):
        """
        Shorten a URI into ``prefix:local`` form.

        :param str uri: Full URI.

        :rtype: str
        :return: Shortened URI, or the input URI unchanged if no bound
            namespace matches it or the local part would be empty.
        """
        match = self._match(uri)
        if not match or not match[2]:
            return str(uri)

        return '{}:{}'.format(match[0], match[2])


    def expand(self, curie):
        """
        Expand a ``prefix:local`` string into a full URI.

        :param str curie: Short form.

        :rtype: str
        :return: Full URI, or the input unchanged if the prefix is unbound.
        """
        pfx, sep, local = str(curie).partition(':')
        ns = self.get(pfx) if sep else None
        if ns is None:
            return str(curie)

        return str(ns) + local
