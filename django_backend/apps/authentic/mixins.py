"""
Model mixins for authenticable models.
"""

from .config import AuthenticConfig
from .registry import site


class AuthenticModelMixin:
    """
    Mixin giving a model access to its authentication config.

    The model still has to be registered, usually with ``acts_as_authentic``.
    """

    authentic_site = site

    @classmethod
    def get_authentic_config(cls) -> AuthenticConfig:
        """Return the configuration this model was registered with."""
        return cls.authentic_site.get_config(cls)
