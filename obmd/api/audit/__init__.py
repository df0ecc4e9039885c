"""Link audit domain."""

from .audit_links import audit_links
from .LinkIssue import IssueKind, LinkIssue

__all__ = ["IssueKind", "LinkIssue", "audit_links"]
