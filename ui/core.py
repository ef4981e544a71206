"""ui.core

Core helpers for the FAFSA Assistant UI kit (FastHTML + DaisyUI + Tailwind).

Design stance:
- Tailwind utilities carry the USWDS-flavoured look (navy primary, red
  secondary, cyan accent) declared in `ui/theme.css`.
- DaisyUI provides a few semantic primitives (card, checkbox, radio, loading).
- Components resolve their classes through `ui.variants.Variants` and merge
  caller overrides with `cn`.

Runtime notes:
- Tailwind is compiled in the browser by `@tailwindcss/browser`, so
  `ui/theme.css` is shipped as a `text/tailwindcss` style block.
- Alpine.js drives the small amount of client state (tooltip open/closed).
"""

from __future__ import annotations

import inspect
from importlib import resources as importlib_resources
from pathlib import Path

from fasthtml.common import *
import fasthtml.components as fh

DEFAULT_THEME = "light"


# -----------------------------------------------------------------------------
# Classname utilities
# -----------------------------------------------------------------------------

# Negative Tailwind utility prefixes (for proper class expansion)
_neg_twu_pfxs = set(
    "mt ml mr mb mx my translate rotate scale skew inset top bottom left right z space".split()
)


def _is_neg_twu(x: str) -> bool:
    """Check if string is a negative Tailwind utility (e.g., -mt-4)."""
    return x.startswith("-") and len(parts := x[1:].split("-")) >= 2 and parts[0] in _neg_twu_pfxs


def cls_join(*classes: str) -> str:
    """Join class strings, filtering falsy values."""
    return " ".join(c for c in classes if c)


_TEXT_SIZES = {"xs", "sm", "base", "lg", "xl", *(f"{n}xl" for n in range(2, 10))}
_TEXT_ALIGN = {"left", "center", "right", "justify", "start", "end"}
_FONT_WEIGHTS = {
    "thin", "extralight", "light", "normal", "medium", "semibold", "bold", "extrabold", "black",
}
_LINE_STYLES = {"solid", "dashed", "dotted", "double", "hidden", "none"}
_SIDES = {"t", "r", "b", "l", "x", "y", "s", "e", "tl", "tr", "br", "bl"}

_EXACT_GROUPS = {
    **dict.fromkeys(
        "block inline-block inline flex inline-flex grid inline-grid hidden contents table".split(),
        "display",
    ),
    **dict.fromkeys("static fixed absolute relative sticky".split(), "position"),
    **dict.fromkeys("visible invisible collapse".split(), "visibility"),
}

# Longest prefixes first so `min-h` wins over `h` and `gap-x` over `gap`.
_PREFIX_GROUPS = (
    "min-w", "min-h", "max-w", "max-h",
    "gap-x", "gap-y", "gap",
    "px", "py", "pt", "pr", "pb", "pl", "p",
    "mx", "my", "mt", "mr", "mb", "ml", "m",
    "inset-x", "inset-y", "inset", "top", "right", "bottom", "left",
    "translate-x", "translate-y", "rotate", "scale",
    "w", "h", "size", "z", "opacity", "duration", "ease", "leading", "tracking",
    "cursor", "items", "justify", "self", "whitespace", "pointer-events", "appearance",
    "overflow-x", "overflow-y", "overflow", "shadow", "resize", "order",
    "grid-cols", "col-span", "shrink", "grow", "transition",
)

# A later class in the key group removes earlier classes in these groups.
_CONFLICTS = {
    "p": ("px", "py", "pt", "pr", "pb", "pl"),
    "px": ("pr", "pl"),
    "py": ("pt", "pb"),
    "m": ("mx", "my", "mt", "mr", "mb", "ml"),
    "mx": ("mr", "ml"),
    "my": ("mt", "mb"),
    "gap": ("gap-x", "gap-y"),
    "inset": ("inset-x", "inset-y", "top", "right", "bottom", "left"),
    "size": ("w", "h"),
}


def _split_modifiers(token: str) -> tuple[str, str]:
    """Split `hover:focus:bg-x` into (`hover:focus:`, `bg-x`), ignoring `:` inside brackets."""
    depth = 0
    cut = -1
    for i, ch in enumerate(token):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == ":" and depth == 0:
            cut = i
    return token[: cut + 1], token[cut + 1 :]


def _utility_group(util: str) -> str | None:
    """Name the CSS property group a Tailwind utility writes, or None if unknown."""
    util = util.lstrip("!").lstrip("-")
    if util in _EXACT_GROUPS:
        return _EXACT_GROUPS[util]

    head, _, rest = util.partition("-")

    if head == "text" and rest:
        if rest in _TEXT_SIZES:
            return "text-size"
        if rest in _TEXT_ALIGN:
            return "text-align"
        return "text-color"
    if head == "font" and rest:
        return "font-weight" if rest in _FONT_WEIGHTS else "font-family"
    if head == "bg" and rest:
        return "bg-color"
    if head == "border":
        side, _, value = rest.partition("-")
        if side in _SIDES:
            return f"border-w-{side}" if not value or value.isdigit() else f"border-color-{side}"
        if not rest or rest.isdigit():
            return "border-w"
        if rest in _LINE_STYLES:
            return "border-style"
        return "border-color"
    if head == "ring":
        if rest.startswith("offset-"):
            value = rest[len("offset-"):]
            return "ring-offset-w" if value.isdigit() else "ring-offset-color"
        if not rest or rest.isdigit():
            return "ring-w"
        if rest == "inset":
            return "ring-inset"
        return "ring-color"
    if head == "outline":
        return "outline-w" if not rest or rest.isdigit() else "outline"
    if head == "rounded":
        side = rest.split("-")[0] if rest else ""
        return f"rounded-{side}" if side in _SIDES else "rounded"
    if head == "flex" and rest:
        if rest in ("row", "col", "row-reverse", "col-reverse"):
            return "flex-direction"
        if rest in ("wrap", "nowrap", "wrap-reverse"):
            return "flex-wrap"
        if rest.startswith("shrink"):
            return "shrink"
        if rest.startswith("grow"):
            return "grow"
        return "flex"

    for prefix in _PREFIX_GROUPS:
        if util == prefix or util.startswith(prefix + "-"):
            return prefix
    return None


def cn(*classes: str) -> str:
    """Join class strings; later Tailwind utilities override earlier ones.

    Two classes conflict when they carry the same modifiers (`hover:`,
    `focus:`, ...) and write the same property group, e.g. `h-11` / `h-20`
    or `bg-primary` / `bg-error`. The earlier one is dropped, so caller
    classes passed last always win. Unknown classes are kept, deduplicated.

        cn("h-11 px-5 text-base", "h-20")  -> "px-5 text-base h-20"
    """

    kept: list[tuple[str, str, str | None]] = []
    for token in cls_join(*classes).split():
        mods, util = _split_modifiers(token)
        group = _utility_group(util)
        if group is None:
            kept = [k for k in kept if k[0] != token]
        else:
            shadowed = {group, *_CONFLICTS.get(group, ())}
            kept = [k for k in kept if not (k[1] == mods and k[2] in shadowed)]
        kept.append((token, mods, group))
    return " ".join(k[0] for k in kept)


# -----------------------------------------------------------------------------
# CDN headers
# -----------------------------------------------------------------------------

daisy_link = Link(
    href="https://cdn.jsdelivr.net/npm/daisyui@5",
    rel="stylesheet",
    type="text/css",
)

tw_scr = Script(src="https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4")

alpine_scr = Script(src="https://cdn.jsdelivr.net/npm/alpinejs@3/dist/cdn.min.js", defer=True)

# Base headers (framework only)

daisy_hdrs = (daisy_link, tw_scr, alpine_scr)


def _read_pkg_text(filename: str) -> str:
    """Read a text file shipped inside the `ui` package."""
    try:
        return importlib_resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError, TypeError):
        # Running from a source checkout without package metadata
        here = Path(__file__).resolve().parent
        return (here / filename).read_text(encoding="utf-8")


def theme_css(path: str | None = None) -> Style:
    """Return a `<style type="text/tailwindcss">` tag with the theme.

    - If `path` is None, loads `ui/theme.css` from the package.
    - If `path` is provided, loads that file from disk.
    """

    if path is None:
        return Style(_read_pkg_text("theme.css"), type="text/tailwindcss")

    css_content = Path(path).read_text(encoding="utf-8")
    return Style(css_content, type="text/tailwindcss")


# Opinionated default headers (framework + theme)
ui_hdrs = (*daisy_hdrs, theme_css())


def daisy_app(*, with_theme: bool = True, theme: str = DEFAULT_THEME, **kw):
    """Create a FastHTML app with DaisyUI, Tailwind runtime and Alpine headers.

    Args:
        with_theme: If True, injects `ui/theme.css` into the document.
        theme: DaisyUI theme name set on `<html data-theme=...>`.
        **kw: Passed through to `fast_app`.

    Returns:
        (app, rt)
    """

    hdrs = kw.pop("hdrs", ())
    htmlkw = {"data-theme": theme, **kw.pop("htmlkw", {})}
    base_hdrs = ui_hdrs if with_theme else daisy_hdrs
    return fast_app(hdrs=(*base_hdrs, *hdrs), pico=False, htmlkw=htmlkw, **kw)


# -----------------------------------------------------------------------------
# Component factory for DaisyUI primitives
# -----------------------------------------------------------------------------


def hyphens2camel(x: str) -> str:
    """Convert `kebab-case` to `CamelCase`."""
    return "".join(o.title() for o in x.split("-"))


def mk_compfn(
    compcls: str,
    tag: str | None = None,
    name: str | None = None,
    xcls: str = "",
    *,
    slot: str | None = None,
    **compkw,
):
    """Create a thin DaisyUI primitive wrapper.

    - Always applies the base DaisyUI class (`compcls`).
    - Supports the modifier shorthand:
        cls='-primary -sm' -> '{compcls}-primary {compcls}-sm'

    Args:
        compcls: DaisyUI base class (e.g. 'checkbox', 'card')
        tag: FastHTML component name (e.g. 'Input', 'Div')
        name: Python function name
        xcls: Extra classes always added
        slot: If set, adds data-slot by default.
        **compkw: Default kwargs passed to the underlying element.
    """

    if not name:
        name = hyphens2camel(compcls)
    if not tag:
        tag = name

    compfunc = getattr(fh, tag)

    def fn(*c, cls: str = "", **kw):
        # '-primary' -> 'checkbox-primary' (unless it's a negative Tailwind utility)
        cls_expanded = " ".join(
            f"{compcls if x and x.startswith('-') and not _is_neg_twu(x) else ''}{x}" for x in cls.split()
        )

        if slot is not None and "data_slot" not in kw:
            kw["data_slot"] = slot

        return compfunc(*c, cls=cn(compcls, cls_expanded, xcls), **compkw, **kw)

    fn.__name__ = name
    fn.__doc__ = f"DaisyUI primitive: .{compcls}. Use cls='-modifier' to expand to {compcls}-modifier."

    # Register in caller's namespace
    inspect.currentframe().f_back.f_globals[name] = fn
    return fn
