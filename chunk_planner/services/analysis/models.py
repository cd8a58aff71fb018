"""Document characteristics produced by the analyzer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_LANGUAGE = "en"


class DocumentCategory(str, Enum):
    VERY_SMALL = "very_small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    VERY_LARGE = "very_large"


class StructureType(str, Enum):
    NONE = "none"
    SIMPLE = "simple"
    SECTIONED = "sectioned"
    HIERARCHICAL = "hierarchical"

    @property
    def rank(self) -> int:
        """Position in the ordering none < simple < sectioned < hierarchical."""
        return _STRUCTURE_RANK[self]


_STRUCTURE_RANK = {
    StructureType.NONE: 0,
    StructureType.SIMPLE: 1,
    StructureType.SECTIONED: 2,
    StructureType.HIERARCHICAL: 3,
}


class DocumentCharacteristics(BaseModel):
    """Size, structure and complexity of one document. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=0, description="Character count")
    category: DocumentCategory
    has_structure: bool
    structure_type: StructureType
    language: str = Field(default=DEFAULT_LANGUAGE, description="Placeholder; detection is not implemented")
    complexity: float = Field(..., ge=0.0, le=1.0, description="Sentence-density proxy")

    @model_validator(mode="after")
    def check_structure(self) -> "DocumentCharacteristics":
        if self.has_structure == (self.structure_type is StructureType.NONE):
            raise ValueError(
                f"has_structure={self.has_structure} contradicts structure_type={self.structure_type.value!r}"
            )
        return self
