"""Quality checklist model."""

from pydantic import BaseModel, Field, computed_field


# (field name, display label) in display order
CHECK_LABELS: tuple[tuple[str, str], ...] = (
    ("photos_divisions_ok", "Photos Divisions"),
    ("no_duplicates_ok", "No Duplicates"),
    ("photo_quality", "Photo Quality"),
    ("location_ok", "Location OK"),
    ("description_ok", "Description OK"),
    ("base_info_ok", "Base Info OK"),
)

TOTAL_CHECKS = len(CHECK_LABELS)


class QualityChecklist(BaseModel):
    """Uniform pass/fail outcome for each quality check."""
    photos_divisions_ok: bool = Field(False, description="No problematic photo divisions detected")
    no_duplicates_ok: bool = Field(False, description="No duplicate listing detected")
    photo_quality: bool = False
    location_ok: bool = False
    description_ok: bool = False
    base_info_ok: bool = False
    has_data: bool = Field(False, description="False when the listing has no score object at all")

    @computed_field
    @property
    def passed_count(self) -> int:
        return sum(1 for name, _ in CHECK_LABELS if getattr(self, name))

    @computed_field
    @property
    def total_count(self) -> int:
        return TOTAL_CHECKS

    def items(self) -> list[dict]:
        """Labelled outcomes for display."""
        return [
            {"key": name, "label": label, "passed": getattr(self, name)}
            for name, label in CHECK_LABELS
        ]

    def summary(self) -> str:
        return f"Overall {self.passed_count} / {self.total_count}"
