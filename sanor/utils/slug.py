import re
import time

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str, trim: bool = True) -> str:
    """Lowercase ``value`` and collapse every run of non [a-z0-9] characters into one hyphen.

    With ``trim`` the leading/trailing hyphens are dropped ("  Pink Top!" -> "pink-top");
    without it they are kept ("  Pink Top!" -> "-pink-top-").
    """
    slug = _NON_ALNUM.sub("-", (value or "").lower())
    return slug.strip("-") if trim else slug


def unique_product_slug(name: str) -> str:
    # Millisecond timestamp suffix keeps repeated product names apart
    return f"{slugify(name)}-{int(time.time() * 1000)}"
