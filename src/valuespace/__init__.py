"""valuespace: XML-Schema value-space constraints for typed RDF values."""

__version__ = "0.1.0"
