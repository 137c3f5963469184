import logging
import re

from collections.abc import Iterable

from rdfnode import env
from rdfnode.exceptions import InvalidArgumentError, UnknownMethodError


logger = logging.getLogger(__name__)


class Resource:
    """
    An RDF resource.

    A resource is a single node of a graph, identified by a URI or by a blank
    node identifier (``_:xxx``), carrying any number of properties. Each
    property holds an ordered list of values in which a value appears only
    once.

    Properties are addressed by their short (``prefix:local``) name, e.g.
    ``foaf:name``. Values are opaque: strings, rdflib terms or other
    resources, compared with ``==`` when removing duplicates.

    >>> rsrc = Resource('http://example.org/alice')
    >>> rsrc.set('rdf:type', 'foaf:Person')
    >>> rsrc.add('foaf:name', 'Alice')
    >>> rsrc.add('foaf:name', ['Alice', 'Ali'])
    >>> rsrc.all('foaf:name')
    ['Alice', 'Ali']
    >>> rsrc.getFoaf_Name()
    'Alice'
    >>> rsrc.label()
    'Alice'

    **Note:** Resources are not thread safe. Instances shared across threads
    must be guarded by the owner.
    """

    BNODE_PFX = '_:'
    """Prefix denoting a blank node identifier."""

    label_props = ('rdfs:label', 'foaf:name', 'dc:title')
    """Properties looked up in order by :py:meth:`label`."""

    _dyn_accessor_ptn = re.compile(r'^(get|all)([A-Z][A-Za-z0-9]*)_(\w+)$')


    ## MAGIC METHODS ##

    def __init__(self, identifier, ns_registry=None):
        """
        Instantiate an in-memory resource with no properties.

        :param str identifier: URI or blank node identifier of the resource.
            rdflib terms are stored as plain strings; a ``BNode`` must be
            passed in ``_:xxx`` form to be recognized as a blank node.
        :param rdfnode.namespaces.NamespaceRegistry ns_registry: Prefix table
            used by the namespace-aware methods. If not provided, the
            registry of the default environment is used.

        :raise rdfnode.exceptions.InvalidArgumentError: if ``identifier``
            is not a non-empty string.
        """
        if not isinstance(identifier, str) or not identifier:
            raise InvalidArgumentError('identifier', identifier)

        self._identifier = str(identifier)
        self._ns_registry = ns_registry
        self._properties = {}


    def __str__(self):
        return self._identifier


    def __repr__(self):
        return '<{}({!r})>'.format(self.__class__.__name__, self._identifier)


    def __contains__(self, prop):
        return self.has(prop)


    def __getattr__(self, name):
        """
        Translate ``get<Ns>_<Name>`` and ``all<Ns>_<Name>`` calls.

        ``rsrc.getFoaf_Name()`` is equivalent to ``rsrc.get('foaf:name')``
        and ``rsrc.allDc_Title()`` to ``rsrc.all('dc:title')``. The prefix
        is lower-cased; so is the first character of the local name. A
        property whose local name starts with a capital letter, e.g.
        ``ex:ABC``, cannot be reached this way: use
        :py:meth:`get_by_field` or :py:meth:`all_by_field` instead.

        :raise rdfnode.exceptions.UnknownMethodError: if the name does not
            match either pattern.
        """
        # Private names are never translated. This also keeps copy and
        # pickle from recursing before ``__init__`` has run.
        match = (
                None if name.startswith('_')
                else self._dyn_accessor_ptn.match(name))
        if not match:
            raise UnknownMethodError(self.__class__.__name__, name)

        method, ns, local = match.groups()
        prop = '{}:{}'.format(ns.lower(), local[0].lower() + local[1:])

        if method == 'get':
            return lambda: self.get(prop)
        else:
            return lambda: self.all(prop)


    ## PROPERTIES ##

    @property
    def identifier(self):
        """
        URI or blank node identifier of the resource. Read only.

        :rtype: str
        """
        return self._identifier


    @property
    def ns_registry(self):
        """
        Namespace registry used to resolve prefixes.

        Falls back to the default environment registry, which is set up on
        first access if needed.

        :rtype: rdfnode.namespaces.NamespaceRegistry
        """
        if self._ns_registry is None:
            if not hasattr(env, 'app_globals'):
                env.setup()
            return env.app_globals.ns_registry

        return self._ns_registry


    ## PUBLIC METHODS ##

    def get_identifier(self):
        """
        Identifier of the resource.

        :rtype: str
        """
        return self._identifier


    def set(self, prop, values):
        """
        Replace all the values of a property.

        Duplicate values are dropped, keeping the first occurrence. Setting
        ``None`` or an empty sequence removes the property.

        :param str prop: Property name, e.g. ``foaf:name``.
        :param values: A single value or an iterable of values.
        """
        self._check_prop(prop)

        values = self._unique(self._as_list(values))
        if values:
            self._properties[prop] = values
        elif prop in self._properties:
            logger.debug('Removing property {} from {}.'.format(
                prop, self._identifier))
            del self._properties[prop]


    def add(self, prop, value):
        """
        Append one or more values to a property.

        Values already present are skipped. Adding ``None`` does nothing.

        :param str prop: Property name.
        :param value: A single value or an iterable of values.
        """
        self._check_prop(prop)

        if value is None:
            return

        values = self._properties.get(prop, [])[:]
        for v in self._as_list(value):
            if v not in values:
                values.append(v)

        self.set(prop, values)


    def delete(self, prop):
        """
        Remove a property and all its values.

        :param str prop: Property name.
        """
        self.set(prop, None)


    def has(self, prop):
        """
        Whether a property has any values.

        :param str prop: Property name.

        :rtype: bool
        """
        self._check_prop(prop)

        return prop in self._properties


    def get(self, prop):
        """
        First value of a property.

        Values are returned in the order they were added; no other ordering
        is applied.

        :param str prop: Property name.

        :return: The first value, or ``None`` if the property is not set.
        """
        self._check_prop(prop)

        values = self._properties.get(prop)

        return values[0] if values else None


    def all(self, prop):
        """
        All values of a property.

        :param str prop: Property name.

        :rtype: list
        :return: A copy of the values, or an empty list if the property is
            not set. Changing the list does not affect the resource.
        """
        self._check_prop(prop)

        return self._properties.get(prop, [])[:]


    def join(self, prop, glue=' '):
        """
        Values of a property joined in a string.

        :param str prop: Property name.
        :param str glue: Separator.

        :rtype: str
        """
        return glue.join(str(v) for v in self.all(prop))


    def property_names(self):
        """
        Names of the properties that have values, in insertion order.

        :rtype: list(str)
        """
        return list(self._properties)


    def get_by_field(self, ns, local):
        """
        First value of a property given its prefix and local name.

        Equivalent to ``get_by_field('foaf', 'name') == get('foaf:name')``.
        """
        return self.get('{}:{}'.format(ns.lower(), local))


    def all_by_field(self, ns, local):
        """
        All values of a property given its prefix and local name.
        """
        return self.all('{}:{}'.format(ns.lower(), local))


    def is_bnode(self):
        """
        Whether the resource is a blank node.

        :rtype: bool
        """
        return self._identifier.startswith(self.BNODE_PFX)


    def types(self):
        """
        All RDF types of the resource.

        :rtype: list
        """
        return self.all('rdf:type')


    def type(self):
        """
        First RDF type of the resource, or ``None``.
        """
        return self.get('rdf:type')


    def namespace(self):
        """
        Prefix of the namespace that the resource identifier is part of.

        :rtype: str or None
        """
        return self.ns_registry.namespace_of_uri(self._identifier)


    def short_identifier(self):
        """
        Identifier shortened to ``prefix:local`` form if possible.

        :rtype: str
        """
        return self.ns_registry.shorten(self._identifier)


    def label(self):
        """
        Human-readable label.

        This is the first value found among ``rdfs:label``, ``foaf:name``
        and ``dc:title``, in this order. If none is set, the short
        identifier is returned.
        """
        for prop in self.label_props:
            label = self.get(prop)
            if label is not None:
                return label

        return self.short_identifier()


    def dump(self):
        """
        Human-readable dump of the resource for debugging.

        The output is also sent to the module logger at ``DEBUG`` level. Its
        format is not stable.

        :rtype: str
        """
        lines = [
            self._identifier,
            'Class: {}'.format(self.__class__.__name__),
            'Types: {}'.format(', '.join(str(t) for t in self.types())),
            'Properties:',
        ]
        for prop, values in self._properties.items():
            lines.append('  {} =>'.format(prop))
            lines.extend('    {}'.format(v) for v in values)

        out = '\n'.join(lines)
        logger.debug('Resource dump:\n{}'.format(out))

        return out


    ## PROTECTED METHODS ##

    @staticmethod
    def _check_prop(prop):
        if not isinstance(prop, str) or not prop:
            raise InvalidArgumentError('property', prop)


    @staticmethod
    def _as_list(values):
        """
        Normalize a value or an iterable of values into a list.

        Strings and non-iterable objects are single values. ``None`` values
        are dropped.
        """
        if values is None:
            return []
        if (
                isinstance(values, (str, bytes))
                or not isinstance(values, Iterable)):
            return [values]

        return [v for v in values if v is not None]


    @staticmethod
    def _unique(values):
        """
        Remove duplicates from a list, keeping the first occurrence.

        Membership is tested with ``==`` so unhashable values are allowed.
        """
        uniq = []
        for v in values:
            if v not in uniq:
                uniq.append(v)

        return uniq
