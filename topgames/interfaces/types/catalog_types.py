"""Catalog file types - Pydantic models for user-supplied section catalogs.

External contract for catalog YAML files read by the CLI.
These models are thin adapters around DTOs from helpers/dto/section_dto.py.

Architecture:
- Validation of untrusted input happens here, at the interface edge
- Components and services only ever see Section DTOs (no Pydantic imports there)

File format:
    sections:
      - type: SECTION_TYPE_RECENTLY_PLAYED
        hidden: false
      - type: games            # short names accepted
        data: {title: "Top slots"}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from topgames.helpers.dto.section_dto import Section, SectionType
from topgames.helpers.exceptions import LayoutConfigurationError


class CatalogEntryModel(BaseModel):
    """One section record in a catalog file."""

    model_config = ConfigDict(extra="forbid")

    type: SectionType = Field(..., description="Section type (SECTION_TYPE_GAMES or games)")
    hidden: bool = Field(default=False, description="Hide the section (recently played only)")
    data: dict[str, Any] | None = Field(default=None, description="Opaque payload for the renderer")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            name = value.strip().upper()
            if not name.startswith("SECTION_TYPE_"):
                name = f"SECTION_TYPE_{name}"
            return name
        return value

    def to_dto(self) -> Section:
        return Section(type=self.type, hidden=self.hidden, data=self.data)


class CatalogFileModel(BaseModel):
    """Top-level catalog file."""

    model_config = ConfigDict(extra="forbid")

    sections: list[CatalogEntryModel] = Field(default_factory=list)

    def to_dto(self) -> tuple[Section, ...]:
        return tuple(entry.to_dto() for entry in self.sections)


def load_catalog_file(path: str | Path) -> tuple[Section, ...]:
    """
    Read and validate a catalog YAML file.

    A bare list of entries is accepted as shorthand for ``{sections: [...]}``.

    Raises:
        LayoutConfigurationError: If the file is missing, not YAML, or fails validation
    """
    catalog_path = Path(path)
    try:
        raw = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise LayoutConfigurationError(f"Failed to read catalog {catalog_path}: {e}") from e

    if isinstance(raw, list):
        raw = {"sections": raw}
    try:
        model = CatalogFileModel.model_validate(raw or {})
    except ValidationError as e:
        raise LayoutConfigurationError(f"Invalid catalog {catalog_path}: {e}") from e
    return model.to_dto()
