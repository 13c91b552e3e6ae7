"""Domain models for resolved locations and docs payloads."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class ResolvedLocation(BaseModel):
    """A public, human-followable origin of a declaration."""

    file_name: str
    url: str
    package: str
    line: int
    column: int

    @field_validator("line")
    @classmethod
    def line_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("line must be >= 1")
        return v


class NavigationAction(StrEnum):
    """Actions a client can take on a live docs session."""

    NEXT = "next"
    PREVIOUS = "previous"


class NavigationAffordance(BaseModel):
    """One navigation button, with its current enabled state."""

    label: str
    action: NavigationAction
    enabled: bool


class DocsField(BaseModel):
    """A named section of the rendered docs body."""

    name: str
    value: str


class SourceLine(BaseModel):
    """One "implemented in" entry, in declared source order."""

    location: ResolvedLocation | None = None
    degraded: bool = False
    error: str | None = None

    @property
    def text(self) -> str:
        if self.location is None:
            return f"*unavailable*: {self.error}"
        loc = self.location
        return f"**{loc.package}**: [`{loc.file_name}:{loc.line}:{loc.column}`]({loc.url})"


class DocsPayload(BaseModel):
    """Everything a front-end needs to display one docs lookup."""

    title: str
    body: str = ""
    fields: list[DocsField] = Field(default_factory=list)
    source_locations: list[SourceLine] = Field(default_factory=list)
    url: str | None = None
    navigation: list[NavigationAffordance] = Field(default_factory=list)
    render_elapsed_ms: float = 0.0
    display: bool = False
    found: bool = True
    session_id: str | None = None

    def field(self, name: str) -> DocsField | None:
        """First field with the given name, if any."""
        return next((f for f in self.fields if f.name == name), None)
