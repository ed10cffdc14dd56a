"""
sqlcharset.encoding.registry - encoding label registry

(c) 2020--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from types import MappingProxyType

from .base import normalise_label, NotFoundError, CanonicalEncoding, NOT_FOUND


class EncodingRegistry:
    """Resolve encoding labels to codecs. Contents are fixed at construction."""

    def __init__(self, definitions=()):
        """
        Build the label index.

        definitions: iterable of (codec, canonical name, aliases)
        """
        index = {}
        for codec, name, aliases in definitions:
            encoding = CanonicalEncoding(codec, name)
            for alias in aliases:
                label = normalise_label(alias)
                if label in index:
                    logging.warning(
                        "Redefining encoding label '%s' from '%s' to '%s'",
                        label, index[label].name, name
                    )
                index[label] = encoding
        self._index = MappingProxyType(index)

    def lookup(self, label):
        """Get codec and canonical name for label; not-found result if not registered."""
        return self._index.get(normalise_label(label), NOT_FOUND)

    def __getitem__(self, label):
        """Get codec and canonical name for label; raise NotFoundError if not found."""
        normlabel = normalise_label(label)
        try:
            return self._index[normlabel]
        except KeyError as exc:
            raise NotFoundError(
                f"No registered encoding matches '{label}' ['{normlabel}']."
            ) from exc

    def __contains__(self, label):
        return normalise_label(label) in self._index

    def __iter__(self):
        """Iterate over registered labels."""
        return iter(self._index.keys())

    def __len__(self):
        return len(self._index)

    def names(self):
        """Canonical names, in order of registration."""
        return tuple(dict.fromkeys(_enc.name for _enc in self._index.values()))

    def aliases(self, name):
        """All labels resolving to a canonical name."""
        return tuple(_k for _k, _v in self._index.items() if _v.name == name)
