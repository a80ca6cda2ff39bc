"""Bottle registration — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from custody.bottle import registry
from custody.bottle.bottle import Bottle
from custody.domain import custody
from custody.errors import IdExists
from custody.membership.registry import ensure_manufacturer
from custody.shared.identifiers import validate_identifier

logger = structlog.get_logger(__name__)


@custody.command(part_of="Bottle")
class RegisterBottle:
    """Register a new bottle under the calling manufacturer."""

    bottle_id = Text(sanitize=False)
    manufacturer = Identifier(required=True)


@custody.command_handler(part_of=Bottle)
class RegisterBottleHandler:
    @handle(RegisterBottle)
    def register_bottle(self, command):
        manufacturer = str(command.manufacturer)
        ensure_manufacturer(manufacturer)

        bottle_id = validate_identifier(command.bottle_id)
        if registry.find_bottle(bottle_id) is not None:
            raise IdExists(f"Bottle '{bottle_id}' is already registered")

        bottle = Bottle.register(bottle_id=bottle_id, manufacturer=manufacturer)
        current_domain.repository_for(Bottle).add(bottle)
        logger.info("Bottle registered", bottle_id=bottle_id, manufacturer=manufacturer)
        return bottle_id
