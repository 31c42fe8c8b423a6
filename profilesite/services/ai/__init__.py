from profilesite.services.ai.profile_enhancer import ProfileEnhancer

__all__ = ["ProfileEnhancer"]
