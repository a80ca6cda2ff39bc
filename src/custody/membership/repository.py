"""Repository for the Member aggregate."""

from custody.domain import custody
from custody.membership.member import Member, Role


@custody.repository(part_of=Member)
class MemberRepository:
    def members_of(self, role: Role) -> list[Member]:
        """All members holding ``role``, in registration order."""
        members = self._dao.query.filter(role=role.value).all().items
        return sorted(members, key=lambda m: m.registered_at)
