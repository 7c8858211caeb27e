"""
Schema validation for untrusted structured data
Composable string/array/object/optional rules with length and count bounds
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

PathSegment = Union[str, int]


class IssueCode(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    TOO_FEW_ITEMS = "too_few_items"
    TOO_MANY_ITEMS = "too_many_items"


@dataclass(frozen=True)
class Issue:
    """A single violation, located by the keys/indices from the schema root"""
    path: Tuple[PathSegment, ...]
    code: IssueCode
    message: str

    @property
    def location(self) -> str:
        return ".".join(str(segment) for segment in self.path) or "value"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.path),
            "code": self.code.value,
            "message": self.message,
        }


class SchemaValidationError(ValueError):
    """Raised when a value does not satisfy its schema"""

    def __init__(self, issues: Sequence[Issue]):
        self.issues = list(issues)
        super().__init__("; ".join(f"{issue.location}: {issue.message}" for issue in self.issues))


@dataclass(frozen=True)
class Bound:
    value: int
    message: Optional[str] = None


class Schema:
    """Common behaviour shared by every rule node"""

    def parse(self, value: Any) -> Any:
        """
        Validate value against this schema
        Args:
            value: Untrusted input
        Returns:
            The constraint-satisfying value
        Raises:
            SchemaValidationError: If any rule is violated
        """
        return _parse(self, value, ())

    def safe_parse(self, value: Any) -> "ParseResult":
        try:
            return ParseResult(success=True, data=_parse(self, value, ()))
        except SchemaValidationError as e:
            return ParseResult(success=False, error=e)

    def optional(self) -> "OptionalSchema":
        return OptionalSchema(self)


@dataclass(frozen=True)
class ParseResult:
    success: bool
    data: Any = None
    error: Optional[SchemaValidationError] = None


@dataclass(frozen=True)
class StringSchema(Schema):
    min_length: Optional[Bound] = None
    max_length: Optional[Bound] = None


@dataclass(frozen=True)
class ArraySchema(Schema):
    item: Schema
    min_items: Optional[Bound] = None
    max_items: Optional[Bound] = None


@dataclass(frozen=True)
class ObjectSchema(Schema):
    # Tuple of (key, schema) pairs, parsed in declaration order
    fields: Tuple[Tuple[str, Schema], ...] = field(default_factory=tuple)

    @property
    def keys(self) -> List[str]:
        return [key for key, _ in self.fields]


@dataclass(frozen=True)
class OptionalSchema(Schema):
    inner: Schema


def _bound(value: Optional[int], message: Optional[str]) -> Optional[Bound]:
    if value is None:
        return None
    return Bound(value, message)


def string(
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
) -> StringSchema:
    return StringSchema(_bound(min_length, min_message), _bound(max_length, max_message))


def array(
    item: Schema,
    min_items: Optional[int] = None,
    max_items: Optional[int] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
) -> ArraySchema:
    return ArraySchema(item, _bound(min_items, min_message), _bound(max_items, max_message))


def object_(fields: Mapping[str, Schema]) -> ObjectSchema:
    return ObjectSchema(tuple(fields.items()))


def optional(inner: Schema) -> OptionalSchema:
    return OptionalSchema(inner)


def _fail(path: Tuple[PathSegment, ...], code: IssueCode, message: str):
    raise SchemaValidationError([Issue(path, code, message)])


def _parse(schema: Schema, value: Any, path: Tuple[PathSegment, ...]) -> Any:
    if isinstance(schema, OptionalSchema):
        if value is None:
            return None
        return _parse(schema.inner, value, path)

    if isinstance(schema, StringSchema):
        return _parse_string(schema, value, path)

    if isinstance(schema, ArraySchema):
        return _parse_array(schema, value, path)

    if isinstance(schema, ObjectSchema):
        return _parse_object(schema, value, path)

    raise TypeError(f"Unsupported schema node: {type(schema).__name__}")


def _parse_string(schema: StringSchema, value: Any, path: Tuple[PathSegment, ...]) -> str:
    if not isinstance(value, str):
        _fail(path, IssueCode.TYPE_MISMATCH, "Expected string")

    low, high = schema.min_length, schema.max_length
    if low and len(value) < low.value:
        _fail(path, IssueCode.TOO_SHORT, low.message or f"Expected minimum length of {low.value}")
    if high and len(value) > high.value:
        _fail(path, IssueCode.TOO_LONG, high.message or f"Expected maximum length of {high.value}")

    return value


def _parse_array(schema: ArraySchema, value: Any, path: Tuple[PathSegment, ...]) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        _fail(path, IssueCode.TYPE_MISMATCH, "Expected array")

    # Count bounds are checked before any element is inspected
    low, high = schema.min_items, schema.max_items
    if low and len(value) < low.value:
        _fail(path, IssueCode.TOO_FEW_ITEMS, low.message or f"Expected at least {low.value} items")
    if high and len(value) > high.value:
        _fail(path, IssueCode.TOO_MANY_ITEMS, high.message or f"Expected at most {high.value} items")

    return [_parse(schema.item, item, path + (index,)) for index, item in enumerate(value)]


def _parse_object(schema: ObjectSchema, value: Any, path: Tuple[PathSegment, ...]) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        _fail(path, IssueCode.TYPE_MISMATCH, "Expected object")

    result: Dict[str, Any] = {}
    for key, child in schema.fields:
        parsed = _parse(child, value.get(key), path + (key,))
        # Absent optional fields are left out rather than set to None
        if parsed is None and isinstance(child, OptionalSchema):
            continue
        result[key] = parsed

    return result
