"""nuri.state
The checks every URI must pass before anyone can see it.
"""

from .components import Components, build_uri_string
from .exceptions import UriSyntaxError
from .schemes import SchemePolicy, policy_for, policy_violations


def assert_valid_state(components: Components) -> None:
    """Enforces RFC 3986 section 3 and 3.3 on how the components fit together, then the rules of the scheme.
    Raises UriSyntaxError naming the first broken generic rule, or every broken scheme rule.
    """
    c: Components = components
    if c.authority is not None and len(c.path) > 0 and not c.path.startswith("/"):
        raise UriSyntaxError("If an authority is present the path must be empty or start with a `/`", "path")

    if c.authority is None and c.path.startswith("//"):
        raise UriSyntaxError(f"If there is no authority the path `{c.path}` can not start with a `//`", "path")

    first_segment: str = c.path.partition("/")[0]
    if c.authority is None and c.scheme is None and ":" in first_segment:
        raise UriSyntaxError(
            "In absence of a scheme and an authority the first path segment cannot contain a colon (\":\") character.",
            "path",
        )

    policy: SchemePolicy | None = policy_for(c.scheme)
    if policy is None:
        return
    violations: list[str] = policy_violations(policy, c)
    if len(violations) > 0:
        raise UriSyntaxError(
            f"The uri `{build_uri_string(c)}` is invalid for the `{c.scheme}` scheme: {'; '.join(violations)}",
            "uri",
        )
