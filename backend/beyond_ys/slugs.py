from __future__ import annotations

import re

from slugify import slugify

# characters dropped outright instead of becoming a separator
_REMOVED_CHARACTERS = re.compile(r"[*+~.,()'\"!:@/]")


def derive_slug(name: str) -> str:
    """Turn a display name into a lowercase, dash-separated identifier."""
    return slugify(_REMOVED_CHARACTERS.sub("", name), lowercase=True)


def is_valid_slug(value: str | None) -> bool:
    return bool(value) and derive_slug(value) == value


class SlugField:
    """Slug input bound to a name input.

    By default the slug follows the name. Switching ``custom`` on freezes it
    so it can be edited by hand; switching it off derives it from the
    current name again.
    """

    def __init__(self, name: str = "", slug: str | None = None, custom: bool = False):
        self._name = name
        self._custom = custom
        self._slug = slug if custom and slug is not None else derive_slug(name)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        if not self._custom:
            self._slug = derive_slug(value)

    @property
    def custom(self) -> bool:
        return self._custom

    @custom.setter
    def custom(self, value: bool) -> None:
        if self._custom and not value:
            self._slug = derive_slug(self._name)
        self._custom = value

    @property
    def slug(self) -> str:
        return self._slug

    @slug.setter
    def slug(self, value: str) -> None:
        if not self._custom:
            raise ValueError("Enable a custom slug before editing it by hand")
        self._slug = value


def resolve_slug(name: str, slug: str | None = None, custom: bool = False) -> str:
    """Slug submitted by a create form."""
    field = SlugField(name, slug=slug, custom=custom)
    if not is_valid_slug(field.slug):
        raise ValueError(f"'{field.slug}' is not a valid slug")
    return field.slug
