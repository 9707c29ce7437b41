import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from albertonet.i18n.messages import DEFAULT_LOCALE, languages, messages

logger = logging.getLogger(__name__)

_MISSING = object()


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _walk(tree: Any, dotted: Optional[str]) -> Any:
    """Follow a dot path through nested mappings; _MISSING when any segment is absent."""
    if not dotted:
        return tree
    node = tree
    for segment in dotted.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return _MISSING
        node = node[segment]
    return node


@dataclass(frozen=True)
class Localization:
    """
    Read-only translation dictionaries keyed by locale.

    Lookups that miss in the requested locale are retried against the
    default locale, so partially translated dictionaries are fine.
    """

    dictionaries: Mapping[str, Mapping[str, Any]]
    default_locale: str = DEFAULT_LOCALE
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.default_locale not in self.dictionaries:
            raise ValueError(f"Default locale '{self.default_locale}' has no dictionary")
        object.__setattr__(self, "dictionaries", _freeze(self.dictionaries))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @property
    def locales(self) -> Tuple[str, ...]:
        return tuple(self.dictionaries)

    def normalize_locale(self, locale: Optional[str]) -> str:
        return locale if locale in self.dictionaries else self.default_locale

    def dictionary(self, locale: Optional[str]) -> Mapping[str, Any]:
        return self.dictionaries[self.normalize_locale(locale)]

    def resolve(
        self, locale: Optional[str], path: Optional[str] = None, key: Optional[str] = None
    ) -> Optional[str]:
        """
        Resolve `key` inside the `path` namespace for `locale`.

        Each stage falls back to the default locale on its own. Anything
        other than a string leaf resolves to None.
        """
        fallback_root = self.dictionaries[self.default_locale]

        fallback_tree = _walk(fallback_root, path)
        tree = _walk(self.dictionary(locale), path)
        if tree is _MISSING:
            tree = fallback_tree

        value = _walk(tree, key)
        if value is _MISSING:
            value = _walk(fallback_tree, key)

        if isinstance(value, str):
            return value

        logger.debug(
            f"No translation for {'.'.join(filter(None, (path, key)))!r} in locale {locale!r}"
        )
        return None

    def translator(
        self, locale: Optional[str], path: Optional[str] = None
    ) -> Callable[[Optional[str]], Optional[str]]:
        def t(key: Optional[str] = None) -> Optional[str]:
            return self.resolve(locale, path, key)

        return t

    def locale_from_path(self, url_path: str) -> str:
        """Pick the locale from the first segment of a URL path, e.g. /es/blog."""
        first = url_path.lstrip("/").split("/", 1)[0]
        return self.normalize_locale(first)


def default_localization(default_locale: str = DEFAULT_LOCALE) -> Localization:
    return Localization(
        dictionaries=messages, default_locale=default_locale, labels=languages
    )
