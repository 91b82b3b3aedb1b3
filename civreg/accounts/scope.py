"""
Request-scoped identity of the signed-in officer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportScope:
    """
    Who is asking, and which division their data is limited to.

    Built once per request from ``request.user`` and handed to the report
    layer, which never looks at the session itself.
    """

    user_id: int
    office_code: str
    username: str
    office_name: str
    role: str

    @classmethod
    def from_user(cls, user):
        return cls(
            user_id=user.pk or 0,
            office_code=user.office_code or '',
            username=user.username or '',
            office_name=user.office_name or '',
            role=user.role,
        )
