"""Prompt compilation for food photograph re-creation.

The prompt is built from the seven style fields of a ``FormData`` using a
fixed four-sentence template. Every field value is inserted verbatim, so the
same form always compiles to a byte-identical prompt.

Template Structure::

    Style: [photo_style] on a [background] with a [angle].
    The mood is set by [color_tone] and a [depth_of_field].
    Subtle props include [props, or "none" when blank].
    The image is high-resolution, photorealistic, and suitable for a [output_type].

Sentences are separated by single newlines.

The compiled prompt is what the user sees under the result. Before it is sent
to the remote model it is wrapped by ``frame_instruction()``, which adds a
fixed sentence asking the model to re-create the uploaded photograph.

Usage
-----
::

    prompt = build_prompt(FormData.defaults())
    instruction = frame_instruction(prompt)
"""

from __future__ import annotations

from .form import FormData

# Substituted for an empty props field.
NO_PROPS = "none"

_FRAMING_SENTENCE = "Following the user's instructions, re-create this food photograph."


def build_prompt(form: FormData) -> str:
    """Compile the natural-language prompt for a form.

    Args:
        form: Fully populated style form.

    Returns:
        The prompt, one sentence per line.
    """
    props = form.props if form.props.strip() else NO_PROPS

    lines = [
        f"Style: {form.photo_style} on a {form.background} with a {form.angle}.",
        f"The mood is set by {form.color_tone} and a {form.depth_of_field}.",
        f"Subtle props include {props}.",
        "The image is high-resolution, photorealistic, and suitable for a "
        f"{form.output_type}.",
    ]
    return "\n".join(lines)


def frame_instruction(prompt: str) -> str:
    """Wrap a compiled prompt in the re-creation request sent to the model."""
    return f"{_FRAMING_SENTENCE} Instructions: {prompt}"
