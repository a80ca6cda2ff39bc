"""Member registration — one command per role, one handler for all four."""

import structlog
from protean import handle
from protean.fields import Identifier

from custody.domain import custody
from custody.membership import registry
from custody.membership.member import Member, Role

logger = structlog.get_logger(__name__)


@custody.command(part_of="Member")
class RegisterManufacturer:
    account = Identifier(required=True)


@custody.command(part_of="Member")
class RegisterCarrier:
    account = Identifier(required=True)


@custody.command(part_of="Member")
class RegisterRetailer:
    account = Identifier(required=True)


@custody.command(part_of="Member")
class RegisterCustomer:
    account = Identifier(required=True)


@custody.command_handler(part_of=Member)
class RegistrationHandler:
    @handle(RegisterManufacturer)
    def register_manufacturer(self, command):
        return self._register(Role.MANUFACTURER, command.account)

    @handle(RegisterCarrier)
    def register_carrier(self, command):
        return self._register(Role.CARRIER, command.account)

    @handle(RegisterRetailer)
    def register_retailer(self, command):
        return self._register(Role.RETAILER, command.account)

    @handle(RegisterCustomer)
    def register_customer(self, command):
        return self._register(Role.CUSTOMER, command.account)

    def _register(self, role: Role, account: str) -> str:
        member = registry.register(role, str(account))
        logger.info("Member registered", account=str(member.account), role=role.value)
        return str(member.account)
