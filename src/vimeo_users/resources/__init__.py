from .users import UsersService

__all__ = ["UsersService"]
