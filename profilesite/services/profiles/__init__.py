from profilesite.services.profiles.profile_service import ProfileService

__all__ = ["ProfileService"]
