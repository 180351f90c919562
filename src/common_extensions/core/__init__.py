"""Core extension helpers.

Stateless helpers over collections, dictionaries, iterables and strings,
plus line ending handling and method lookup along a class hierarchy.
"""

from common_extensions.core.clone_utils import (
    DeepCloneable,
    deep_clone,
    shallow_clone,
)
from common_extensions.core.collection_utils import append_all, replace_all
from common_extensions.core.dict_utils import (
    ConcurrentDict,
    add_or_replace,
    get_or_create,
)
from common_extensions.core.enumerable_utils import (
    NullItemPolicy,
    any_none,
    for_each,
    join,
    to_collection,
    to_string_iter,
    with_index,
    write_lines,
)
from common_extensions.core.errors import (
    AmbiguousMatchError,
    ArgumentNoneError,
    EmptyArgumentError,
    ExtensionsError,
    InvalidArgumentError,
    InvalidOperationError,
    UnsupportedLineEndingStyleError,
)
from common_extensions.core.line_endings import (
    LineEndingStyle,
    classify_line_endings,
    normalize_line_endings,
)
from common_extensions.core.reflection_utils import (
    BindingFlags,
    MethodInfo,
    find_method,
    try_find_method,
)
from common_extensions.core.string_utils import (
    contains_exact,
    ends_with_exact,
    replace_exact,
    starts_with_exact,
    strip_prefix,
    strip_suffix,
)

__all__ = [
    # Errors
    "AmbiguousMatchError",
    "ArgumentNoneError",
    "EmptyArgumentError",
    "ExtensionsError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "UnsupportedLineEndingStyleError",
    # Collections
    "append_all",
    "replace_all",
    # Iterables
    "NullItemPolicy",
    "any_none",
    "for_each",
    "join",
    "to_collection",
    "to_string_iter",
    "with_index",
    "write_lines",
    # Dictionaries
    "ConcurrentDict",
    "add_or_replace",
    "get_or_create",
    # Cloning
    "DeepCloneable",
    "deep_clone",
    "shallow_clone",
    # Strings
    "contains_exact",
    "ends_with_exact",
    "replace_exact",
    "starts_with_exact",
    "strip_prefix",
    "strip_suffix",
    # Line endings
    "LineEndingStyle",
    "classify_line_endings",
    "normalize_line_endings",
    # Reflection
    "BindingFlags",
    "MethodInfo",
    "find_method",
    "try_find_method",
]
