"""Typed model of a TypeDoc JSON API model.

The generator emits a loosely-typed tree keyed by ``kindString`` for
declarations and by ``type`` for type expressions. Both are validated on load
into closed variants; a type expression with an unrecognised ``type`` is kept
as an ``OpaqueType`` instead of failing validation.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class TypedocModel(BaseModel):
    """Base for everything parsed out of the API model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ReflectionKind(StrEnum):
    """Declaration kinds, as spelled in ``kindString``."""

    PROJECT = "Project"
    MODULE = "Module"
    NAMESPACE = "Namespace"
    ENUMERATION = "Enumeration"
    ENUMERATION_MEMBER = "Enumeration member"
    VARIABLE = "Variable"
    FUNCTION = "Function"
    CLASS = "Class"
    INTERFACE = "Interface"
    CONSTRUCTOR = "Constructor"
    PROPERTY = "Property"
    METHOD = "Method"
    CALL_SIGNATURE = "Call signature"
    INDEX_SIGNATURE = "Index signature"
    CONSTRUCTOR_SIGNATURE = "Constructor signature"
    PARAMETER = "Parameter"
    TYPE_LITERAL = "Type literal"
    TYPE_PARAMETER = "Type parameter"
    ACCESSOR = "Accessor"
    GET_SIGNATURE = "Get signature"
    SET_SIGNATURE = "Set signature"
    OBJECT_LITERAL = "Object literal"
    TYPE_ALIAS = "Type alias"
    REFERENCE = "Reference"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> ReflectionKind:
        return cls.UNKNOWN


# Numeric kinds, for models that omit kindString.
NUMERIC_KINDS: dict[int, ReflectionKind] = {
    1: ReflectionKind.PROJECT,
    2: ReflectionKind.MODULE,
    4: ReflectionKind.NAMESPACE,
    8: ReflectionKind.ENUMERATION,
    16: ReflectionKind.ENUMERATION_MEMBER,
    32: ReflectionKind.VARIABLE,
    64: ReflectionKind.FUNCTION,
    128: ReflectionKind.CLASS,
    256: ReflectionKind.INTERFACE,
    512: ReflectionKind.CONSTRUCTOR,
    1024: ReflectionKind.PROPERTY,
    2048: ReflectionKind.METHOD,
    4096: ReflectionKind.CALL_SIGNATURE,
    8192: ReflectionKind.INDEX_SIGNATURE,
    16384: ReflectionKind.CONSTRUCTOR_SIGNATURE,
    32768: ReflectionKind.PARAMETER,
    65536: ReflectionKind.TYPE_LITERAL,
    131072: ReflectionKind.TYPE_PARAMETER,
    262144: ReflectionKind.ACCESSOR,
    524288: ReflectionKind.GET_SIGNATURE,
    1048576: ReflectionKind.SET_SIGNATURE,
    2097152: ReflectionKind.TYPE_ALIAS,
    4194304: ReflectionKind.REFERENCE,
}


class SourceRef(TypedocModel):
    """Where a declaration was found: repo-relative file, 1-based line, 0-based column."""

    file_name: str
    line: int
    character: int = 0


class Flags(TypedocModel):
    is_static: bool = False
    is_optional: bool = False
    is_const: bool = False
    is_readonly: bool = False
    is_abstract: bool = False
    is_private: bool = False
    is_protected: bool = False
    is_public: bool = False
    is_external: bool = False
    is_rest: bool = False


def _join_parts(parts: list[dict[str, Any]]) -> str:
    out = ""
    for part in parts:
        text = part.get("text", "")
        if part.get("kind") == "inline-tag" and part.get("tag") == "@link":
            text = "{@link " + text + "}"
        out += text
    return out


class CommentTag(TypedocModel):
    tag: str
    text: str = ""
    param_name: str | None = None


class Comment(TypedocModel):
    short_text: str = ""
    text: str = ""
    returns: str = ""
    tags: list[CommentTag] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_parts(cls, data: Any) -> Any:
        # Newer generators emit display parts: {"summary": [...], "blockTags": [...]}
        if not isinstance(data, dict) or "summary" not in data:
            return data
        tags = []
        returns = ""
        for block in data.get("blockTags", []):
            tag = block.get("tag", "").removeprefix("@")
            text = _join_parts(block.get("content", []))
            if tag == "returns":
                returns = text
            else:
                tags.append({"tag": tag, "text": text})
        return {"shortText": _join_parts(data["summary"]), "returns": returns, "tags": tags}

    def tagged(self, tag: str) -> list[CommentTag]:
        """Blocks carrying the given tag, e.g. ``example``."""
        return [t for t in self.tags if t.tag == tag]


class SymbolNode(TypedocModel):
    """One declaration of the API model."""

    id: int = 0
    name: str = ""
    kind: ReflectionKind = Field(
        default=ReflectionKind.UNKNOWN,
        validation_alias=AliasChoices("kindString", "kind_string"),
    )
    children: list[SymbolNode] = Field(default_factory=list)
    parameters: list[SymbolNode] = Field(default_factory=list)
    type_parameters: list[SymbolNode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("typeParameter", "typeParameters", "type_parameters"),
    )
    signatures: list[SymbolNode] = Field(default_factory=list)
    sources: list[SourceRef] = Field(default_factory=list)
    flags: Flags = Field(default_factory=Flags)
    comment: Comment | None = None
    type: TypeExpr | None = None
    extended_types: list[TypeExpr] = Field(default_factory=list)
    default_value: str | None = None
    inherited_from: TypeExpr | None = None

    @model_validator(mode="before")
    @classmethod
    def _numeric_kind(cls, data: Any) -> Any:
        # Newer generators only emit the numeric kind.
        if isinstance(data, dict) and isinstance(data.get("kind"), int):
            data = dict(data)
            numeric = data.pop("kind")
            data.setdefault("kindString", NUMERIC_KINDS.get(numeric, ReflectionKind.UNKNOWN).value)
        return data


# --- Type expressions ---


class ReferenceType(TypedocModel):
    type: Literal["reference"] = "reference"
    name: str
    id: int | None = None
    type_arguments: list[TypeExpr] | None = None


class IntrinsicType(TypedocModel):
    type: Literal["intrinsic"] = "intrinsic"
    name: str


class LiteralType(TypedocModel):
    type: Literal["literal"] = "literal"
    value: Any = None


class UnionType(TypedocModel):
    type: Literal["union"] = "union"
    types: list[TypeExpr] = Field(default_factory=list)


class IntersectionType(TypedocModel):
    type: Literal["intersection"] = "intersection"
    types: list[TypeExpr] = Field(default_factory=list)


class QueryType(TypedocModel):
    type: Literal["query"] = "query"
    query_type: TypeExpr


class PredicateType(TypedocModel):
    type: Literal["predicate"] = "predicate"
    name: str
    target_type: TypeExpr | None = None
    asserts: bool = False


class ReflectionType(TypedocModel):
    type: Literal["reflection"] = "reflection"
    declaration: SymbolNode | None = None


class IndexedAccessType(TypedocModel):
    type: Literal["indexedAccess"] = "indexedAccess"
    object_type: TypeExpr
    index_type: TypeExpr


class ArrayType(TypedocModel):
    type: Literal["array"] = "array"
    element_type: TypeExpr


class TupleType(TypedocModel):
    type: Literal["tuple"] = "tuple"
    elements: list[TypeExpr] = Field(default_factory=list)


class OpaqueType(TypedocModel):
    """Any type expression this package does not understand. Raw fields are kept."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "unknown"


_KNOWN_TYPES = frozenset(
    {
        "reference",
        "intrinsic",
        "literal",
        "union",
        "intersection",
        "query",
        "predicate",
        "reflection",
        "indexedAccess",
        "array",
        "tuple",
    }
)


def _type_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return tag if tag in _KNOWN_TYPES else "opaque"


def _quarantine(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Keep a known variant with an unexpected shape as an OpaqueType."""
    try:
        return handler(value)
    except ValidationError:
        if isinstance(value, dict):
            return OpaqueType.model_validate(value)
        raise


TypeExpr = Annotated[
    Annotated[
        Annotated[ReferenceType, Tag("reference")]
        | Annotated[IntrinsicType, Tag("intrinsic")]
        | Annotated[LiteralType, Tag("literal")]
        | Annotated[UnionType, Tag("union")]
        | Annotated[IntersectionType, Tag("intersection")]
        | Annotated[QueryType, Tag("query")]
        | Annotated[PredicateType, Tag("predicate")]
        | Annotated[ReflectionType, Tag("reflection")]
        | Annotated[IndexedAccessType, Tag("indexedAccess")]
        | Annotated[ArrayType, Tag("array")]
        | Annotated[TupleType, Tag("tuple")]
        | Annotated[OpaqueType, Tag("opaque")],
        Discriminator(_type_tag),
    ],
    WrapValidator(_quarantine),
]

# Resolved dotted-access chain, each node a child of the previous one.
SymbolPath = tuple[SymbolNode, ...]

for _model in (
    SymbolNode,
    ReferenceType,
    UnionType,
    IntersectionType,
    QueryType,
    PredicateType,
    ReflectionType,
    IndexedAccessType,
    ArrayType,
    TupleType,
):
    _model.model_rebuild()
