# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "marimo",
#     "colorconverter",
# ]
# ///
"""
Interactive hex <-> RGB color converter.
"""

import marimo

__generated_with = "0.19.2"
app = marimo.App(width="medium", app_title="Color Converter")

with app.setup:
    import marimo as mo

    from colorconverter import convert
    from colorconverter.sinks import MemorySink


@app.cell
def intro():
    mo.md("""
    # Color Converter

    Type a hex color (`#1AF`, `1a2b3c`), functional RGB (`rgb(26, 43, 60)`)
    or a bare triplet (`21, 31, 41`, `21 31 41`, `21，31，41`).
    """)
    return


@app.cell
def color_input():
    color_text = mo.ui.text(
        value="#1AF",
        label="Color",
        placeholder="#RRGGBB, rgb(r, g, b) or r, g, b",
        full_width=True,
    )
    color_text
    return (color_text,)


@app.cell
def conversion(color_text):
    result = convert(color_text.value)
    return (result,)


@app.function
def swatch(hex_color: str) -> mo.Html:
    return mo.Html(
        f'<div style="width:4rem;height:4rem;border-radius:0.5rem;'
        f'border:1px solid #ccc;background:{hex_color}"></div>'
    )


@app.cell
def display(result):
    if result is None:
        output = mo.callout(
            mo.md("No conversion available for this input."),
            kind="warn",
        )
    else:
        output = mo.hstack(
            [
                swatch(result.triplet.to_hex()),
                mo.md(f"## `{result.text}`\n\n{result.label}"),
            ],
            justify="start",
            gap=2,
        )
    output
    return


@app.cell
def kept_colors():
    # Created once; survives edits to the color input
    copied = MemorySink()
    return (copied,)


@app.cell
def history(copied, result):
    copy_button = mo.ui.button(
        label="Keep this color",
        on_click=lambda _: copied.copy(result.copy_text) if result else False,
        disabled=result is None,
    )
    copy_button
    return (copy_button,)


@app.cell
def kept(copied, copy_button):
    copy_button
    mo.md(
        "Kept: " + ", ".join(f"`{c}`" for c in copied.copied)
        if copied.copied
        else ""
    )
    return


if __name__ == "__main__":
    app.run()
