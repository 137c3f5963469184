__doc__ = """
Model for single RDF nodes.

See :class:`~rdfnode.model.resource.Resource`.
"""
