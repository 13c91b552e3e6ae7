"""API model types, domain models and API response types."""

from typedoc_lookup.models.api import (
    ArrayType,
    Comment,
    CommentTag,
    Flags,
    IndexedAccessType,
    IntersectionType,
    IntrinsicType,
    LiteralType,
    OpaqueType,
    PredicateType,
    QueryType,
    ReferenceType,
    ReflectionKind,
    ReflectionType,
    SourceRef,
    SymbolNode,
    SymbolPath,
    TupleType,
    TypeExpr,
    UnionType,
)
from typedoc_lookup.models.domain import (
    DocsField,
    DocsPayload,
    NavigationAction,
    NavigationAffordance,
    ResolvedLocation,
    SourceLine,
)
from typedoc_lookup.models.responses import ErrorResponse

__all__ = [
    # API model
    "ArrayType",
    "Comment",
    "CommentTag",
    # Domain
    "DocsField",
    "DocsPayload",
    # Responses
    "ErrorResponse",
    "Flags",
    "IndexedAccessType",
    "IntersectionType",
    "IntrinsicType",
    "LiteralType",
    "NavigationAction",
    "NavigationAffordance",
    "OpaqueType",
    "PredicateType",
    "QueryType",
    "ReferenceType",
    "ReflectionKind",
    "ReflectionType",
    "ResolvedLocation",
    "SourceLine",
    "SourceRef",
    "SymbolNode",
    "SymbolPath",
    "TupleType",
    "TypeExpr",
    "UnionType",
]
