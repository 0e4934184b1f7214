"""Style form definition and state.

The form is described once by ``FORM_FIELDS``, a tuple of immutable
``FormFieldDescriptor`` objects. Each descriptor carries everything the
presentation layer needs to render the field (label, help text, kind,
allowed options, placeholder) plus the default value used to build the
initial ``FormData``.

``FormData`` is a frozen dataclass. Edits never mutate it in place; each
operation returns a new instance, so the same edit applied twice yields the
same state.

Usage Example
-------------
    >>> form = FormData.defaults()
    >>> form = form.set_field("angle", "Top-down (flat lay)")
    >>> form = form.apply_inspiration("scattered fresh herbs")
    >>> form.props
    'Cutlery, napkin, lemon slices, scattered fresh herbs'
"""

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum


class FieldKind(str, Enum):
    """How a form field is entered by the user."""

    TEXT = "textarea"
    CHOICE = "select"


@dataclass(frozen=True)
class FormFieldDescriptor:
    """Static metadata for one style field."""

    id: str
    label: str
    description: str
    kind: FieldKind
    default: str
    options: tuple[str, ...] = ()
    placeholder: str = ""

    @property
    def is_choice(self) -> bool:
        return self.kind is FieldKind.CHOICE


FORM_FIELDS: tuple[FormFieldDescriptor, ...] = (
    FormFieldDescriptor(
        id="photo_style",
        label="Photography Style",
        description="The overall lighting and feel of the shot.",
        kind=FieldKind.CHOICE,
        options=(
            "Natural light",
            "Studio lighting",
            "Moody tone",
            "Bright & airy",
            "Minimalist",
            "Rustic",
            "Cinematic",
            "Vintage film",
            "Gourmet magazine",
            "High contrast",
        ),
        default="Natural light",
    ),
    FormFieldDescriptor(
        id="background",
        label="Background",
        description="The surface or setting for the dish.",
        kind=FieldKind.CHOICE,
        options=(
            "Wooden table",
            "Marble surface",
            "Dark textured background",
            "Plain pastel color",
            "Restaurant setup",
            "Outdoor daylight",
        ),
        default="Wooden table",
    ),
    FormFieldDescriptor(
        id="angle",
        label="Camera Angle",
        description="The perspective from which the photo is taken.",
        kind=FieldKind.CHOICE,
        options=("Top-down (flat lay)", "45-degree angle", "Eye-level shot"),
        default="45-degree angle",
    ),
    FormFieldDescriptor(
        id="color_tone",
        label="Color Tone & Mood",
        description="The color cast that influences the mood.",
        kind=FieldKind.CHOICE,
        options=("Warm tones", "Cool tones", "Neutral tones"),
        default="Warm tones",
    ),
    FormFieldDescriptor(
        id="depth_of_field",
        label="Depth of Field",
        description="How much of the background is in focus.",
        kind=FieldKind.CHOICE,
        options=("Shallow depth (blurred background)", "Deep focus (everything sharp)"),
        default="Shallow depth (blurred background)",
    ),
    FormFieldDescriptor(
        id="props",
        label="Props (Optional)",
        description="Mention optional props like cutlery, napkins, herbs, etc.",
        kind=FieldKind.TEXT,
        placeholder="e.g., A silver fork, a white linen napkin, and a few scattered fresh herbs.",
        default="Cutlery, napkin, lemon slices",
    ),
    FormFieldDescriptor(
        id="output_type",
        label="Output Intent",
        description="The intended use for the final image.",
        kind=FieldKind.CHOICE,
        options=("Social media post", "Menu image", "Advertisement", "Website hero image"),
        default="Menu image",
    ),
)

FIELD_IDS: tuple[str, ...] = tuple(descriptor.id for descriptor in FORM_FIELDS)

_DESCRIPTORS = {descriptor.id: descriptor for descriptor in FORM_FIELDS}

# Styling ideas offered as one-click additions to the props field
PREDEFINED_INSPIRATIONS: tuple[str, ...] = (
    "A swirl of balsamic glaze",
    "Scattered fresh herbs",
    "A side of lemon wedges",
    "Dusted with powdered sugar",
    "A dollop of cream",
    "Elegant silver cutlery",
    "A rustic linen napkin",
    "Splashes of olive oil",
    "Toasted sesame seeds",
    "A sprinkle of chili flakes",
)


def field_descriptor(field_id: str) -> FormFieldDescriptor:
    """Look up the descriptor for a field identifier.

    Raises:
        ValueError: If the identifier is not a form field
    """
    try:
        return _DESCRIPTORS[field_id]
    except KeyError:
        raise ValueError(f"Unknown form field: {field_id}") from None


@dataclass(frozen=True)
class FormData:
    """Current value of every style field.

    Always fully populated: build it with ``defaults()`` and derive new
    states with ``set_field()`` and ``apply_inspiration()``.
    """

    photo_style: str
    background: str
    angle: str
    color_tone: str
    depth_of_field: str
    props: str
    output_type: str

    @classmethod
    def defaults(cls) -> "FormData":
        """Build the form from each field's declared default."""
        return cls(**{descriptor.id: descriptor.default for descriptor in FORM_FIELDS})

    def get_field(self, field_id: str) -> str:
        field_descriptor(field_id)
        return getattr(self, field_id)

    def set_field(self, field_id: str, value: str) -> "FormData":
        """Return a copy with a single field replaced.

        No validation is done on the value: free-text fields accept anything,
        and choice fields are constrained by the presentation layer.

        Args:
            field_id: One of ``FIELD_IDS``
            value: New value for that field

        Returns:
            New FormData with every other field untouched

        Raises:
            ValueError: If field_id is not a form field
        """
        field_descriptor(field_id)
        return replace(self, **{field_id: value})

    def apply_inspiration(self, idea: str) -> "FormData":
        """Append a styling idea to the props field.

        An empty props field takes the idea with its first letter capitalized.
        Otherwise the idea is appended after ``", "`` with its case unchanged.
        """
        current = self.props.strip()
        if current:
            props = f"{current}, {idea}"
        else:
            props = idea[:1].upper() + idea[1:]
        return replace(self, props=props)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: dict[str, str]) -> "FormData":
        """Build a form from a partial mapping; missing fields take defaults."""
        unknown = set(values) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown form field: {sorted(unknown)[0]}")
        return replace(cls.defaults(), **values)
