"""Tests for foodshot.core.prompt_builder — prompt compilation.

Tests cover:
- Determinism (same form, byte-identical prompt).
- Every field value appears verbatim.
- The "none" fallback for blank props.
- The framing sentence wrapped around the prompt for the remote model.
"""

from __future__ import annotations

import pytest

from foodshot.core.form import FIELD_IDS, FORM_FIELDS, FormData
from foodshot.core.prompt_builder import NO_PROPS, build_prompt, frame_instruction

DEFAULT_PROMPT = (
    "Style: Natural light on a Wooden table with a 45-degree angle.\n"
    "The mood is set by Warm tones and a Shallow depth (blurred background).\n"
    "Subtle props include Cutlery, napkin, lemon slices.\n"
    "The image is high-resolution, photorealistic, and suitable for a Menu image."
)


class TestBuildPrompt:
    """Verify prompt compilation from a style form."""

    def test_default_form(self):
        """Default form compiles to the documented prompt."""
        assert build_prompt(FormData.defaults()) == DEFAULT_PROMPT

    def test_deterministic(self):
        """The same form always yields the same prompt."""
        form = FormData.defaults().set_field("photo_style", "Cinematic")
        assert build_prompt(form) == build_prompt(FormData.from_dict(form.to_dict()))

    @pytest.mark.parametrize("descriptor", [d for d in FORM_FIELDS if d.is_choice], ids=lambda d: d.id)
    def test_every_choice_value_verbatim(self, descriptor):
        """Every option of every choice field appears verbatim in the prompt."""
        for option in descriptor.options:
            form = FormData.defaults().set_field(descriptor.id, option)
            assert option in build_prompt(form)

    def test_all_fields_present(self):
        """No field is silently dropped."""
        form = FormData(
            photo_style="Rustic",
            background="Marble surface",
            angle="Top-down (flat lay)",
            color_tone="Cool tones",
            depth_of_field="Deep focus (everything sharp)",
            props="a silver fork",
            output_type="Advertisement",
        )
        prompt = build_prompt(form)
        for field_id in FIELD_IDS:
            assert form.get_field(field_id) in prompt

    def test_empty_props_becomes_none(self):
        form = FormData.defaults().set_field("props", "")
        assert f"Subtle props include {NO_PROPS}." in build_prompt(form)

    def test_whitespace_props_becomes_none(self):
        form = FormData.defaults().set_field("props", "   ")
        assert "Subtle props include none." in build_prompt(form)

    def test_props_kept_verbatim(self):
        form = FormData.defaults().set_field("props", "  Fork,  knife ")
        assert "Subtle props include   Fork,  knife ." in build_prompt(form)

    def test_one_sentence_per_line(self):
        assert len(build_prompt(FormData.defaults()).split("\n")) == 4


class TestFrameInstruction:
    """Verify the framing sentence sent to the remote model."""

    def test_wraps_prompt(self):
        assert frame_instruction("Style: X.") == (
            "Following the user's instructions, re-create this food photograph. "
            "Instructions: Style: X."
        )

    def test_prompt_is_suffix(self):
        prompt = build_prompt(FormData.defaults())
        assert frame_instruction(prompt).endswith(prompt)
