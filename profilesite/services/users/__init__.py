from profilesite.services.users.user_service import UserService, public_user
from profilesite.services.users.account_service import AccountService

__all__ = ["UserService", "AccountService", "public_user"]
