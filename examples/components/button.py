"""A button component that merges user-supplied class and style attributes.

Shows the usual component flow: own classes (namespaced with a prefix),
captured attributes merged last, and empty attributes omitted entirely.
"""

from html import escape

from tessera import AttributeBuilder, ClassBuilder, StyleBuilder


def render_button(
    label: str,
    *,
    variant: str = "primary",
    large: bool = False,
    disabled: bool = False,
    width: float | None = None,
    captured: dict[str, object] | None = None,
) -> str:
    css = (
        ClassBuilder()
        .set_prefix("sf")
        .add("btn", f"btn-{variant}")
        .add_if_else(large, "btn-lg", "btn-sm")
        .add_if(disabled, "disabled")
        .merge_attributes(captured)
        .build_or_none()
    )
    style = (
        StyleBuilder()
        .add_lazy(width is not None, "width", lambda: width, "px")
        .merge_attributes(captured)
        .build_or_none()
    )
    attrs = (
        AttributeBuilder()
        .add("type", "button")
        .add_if(disabled, "disabled")
        .add_if(css is not None, "class", css)
        .add_if(style is not None, "style", style)
        .fail(disabled and variant == "danger", "Danger buttons cannot be disabled")
        .build()
    )

    rendered = " ".join(
        f'{name}="{escape(value)}"' if value else name for name, value in attrs.items()
    )
    return f"<button {rendered}>{escape(label)}</button>"


if __name__ == "__main__":
    print(render_button("Save", width=120.5, captured={"class": "mt-2 mt-2", "style": "color: blue"}))
    print(render_button("Cancel", variant="secondary", disabled=True))
