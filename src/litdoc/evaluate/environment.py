# topmark:header:start
#
#   project      : LitDoc
#   file         : environment.py
#   file_relpath : src/litdoc/evaluate/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The tag evaluation environment.

The environment maps each tag name to an `Applicative`: the tag's ordered
parameter names plus the handler that validates and builds its result. A
markup evaluator looks tags up here and applies them to the arguments it
parsed:

```python
from litdoc.evaluate import invoke

node = invoke("function", "foo(a, b)", [])
assert node.meta == {"name": "foo", "signature": "foo(a, b)"}
```

Positional arguments bind to parameters in declaration order; keyword
arguments bind by name, where ``_`` may stand for ``-`` (``line_numbers``
binds ``line-numbers``).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from litdoc.config.logging import get_logger
from litdoc.errors import ContractViolation
from litdoc.evaluate.contracts import Arguments
from litdoc.evaluate.tags import TagKind, evaluate

if TYPE_CHECKING:
    from collections.abc import Mapping

    from litdoc.config.logging import LitdocLogger
    from litdoc.evaluate.nodes import Value

logger: LitdocLogger = get_logger(__name__)


def _param_name(keyword: str) -> str:
    return keyword.replace("_", "-")


@dataclass(frozen=True)
class Applicative:
    """Handler descriptor for one tag.

    Attributes:
        name (str): The tag name as written in markup.
        params (tuple[str, ...]): Parameter names in positional order.
        kind (TagKind): The tag kind dispatched to by `evaluate`.
    """

    name: str
    params: tuple[str, ...]
    kind: TagKind

    def bind(self, *args: Any, **kwargs: Any) -> Arguments:
        """Bind call arguments to parameter names.

        Raises:
            ContractViolation: On surplus positional arguments, unknown keywords,
                or a parameter bound twice.
        """
        if len(args) > len(self.params):
            raise ContractViolation(
                self.name,
                f"takes {len(self.params)} positional argument(s) but {len(args)} were given",
            )
        bound: dict[str, Any] = dict(zip(self.params, args))
        for keyword, value in kwargs.items():
            param: str = _param_name(keyword)
            if param not in self.params:
                raise ContractViolation(self.name, "unexpected argument", field=keyword)
            if param in bound:
                raise ContractViolation(self.name, "argument given more than once", field=param)
            bound[param] = value
        return Arguments(self.name, bound)

    def apply(self, *args: Any, **kwargs: Any) -> Value:
        """Bind the arguments and evaluate the tag.

        Raises:
            ContractViolation: If binding fails or the handler rejects the arguments.
        """
        return evaluate(self.kind, self.bind(*args, **kwargs))

    __call__ = apply


def build_environment() -> dict[str, Applicative]:
    """Build the tag name to `Applicative` mapping from `TagKind`."""
    return {kind.value: Applicative(kind.value, kind.params, kind) for kind in TagKind}


_ENVIRONMENT: Mapping[str, Applicative] = MappingProxyType(build_environment())


def get_environment() -> Mapping[str, Applicative]:
    """Return the read-only tag environment."""
    return _ENVIRONMENT


def lookup(tag: str) -> Applicative:
    """Return the `Applicative` for ``tag``.

    Raises:
        ContractViolation: If ``tag`` is not part of the vocabulary.
    """
    try:
        return _ENVIRONMENT[tag]
    except KeyError:
        raise ContractViolation(tag, "unknown tag") from None


def invoke(tag: str, *args: Any, **kwargs: Any) -> Value:
    """Look up ``tag`` and apply it to the given arguments.

    Raises:
        ContractViolation: If the tag is unknown or its contract is violated.
    """
    applicative: Applicative = lookup(tag)
    logger.debug("Invoking @%s", tag)
    return applicative.apply(*args, **kwargs)
