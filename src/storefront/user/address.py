"""User address management: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User


@storefront.command(part_of="User")
class SetAddress:
    """Overwrite a user's shipping address."""

    user_id: Identifier(required=True)
    address: String(required=True, max_length=500)


@storefront.command_handler(part_of=User)
class ManageAddressHandler:
    @handle(SetAddress)
    def set_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        address = user.set_address(command.address)
        repo.add(user)
        return address
