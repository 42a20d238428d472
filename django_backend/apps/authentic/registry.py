"""
Registration of authenticable models.

An ``AuthenticSite`` owns the resolved configuration of every model
registered on it. Registration is a pipeline: the configuration is resolved
from the model's columns, published on the site, then handed to each
registration step in order.

    @acts_as_authentic(login_field='email')
    class Member(models.Model):
        ...

    site.get_config(Member).login_field  # 'email'
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from django.db import models

from .columns import get_column_names
from .config import AuthenticConfig, configure
from .exceptions import NotRegistered
from .signals import model_configured

logger = logging.getLogger(__name__)

RegistrationStep = Callable[[Type[models.Model], AuthenticConfig], None]


class AuthenticSite:
    """Registry of authenticable models and their resolved configuration."""

    def __init__(
        self,
        name: str = 'authentic',
        registration_steps: Optional[Sequence[RegistrationStep]] = None
    ):
        self.name = name
        self._registry: Dict[Type[models.Model], AuthenticConfig] = {}
        self._registration_steps: List[RegistrationStep] = list(registration_steps or [])

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(name={self.name!r})'

    def add_registration_step(self, step: RegistrationStep) -> RegistrationStep:
        """Append a step run after every registration. Usable as a decorator."""
        self._registration_steps.append(step)
        return step

    def resolve(
        self,
        model: Type[models.Model],
        options: Optional[Dict[str, Any]] = None
    ) -> AuthenticConfig:
        """Resolve the configuration of ``model`` without registering it."""
        return configure(model.__name__, options, get_column_names(model))

    def register(self, model: Type[models.Model], **options: Any) -> AuthenticConfig:
        """
        Resolve and publish the configuration of ``model``.

        Registering a model again replaces its previous configuration.
        """
        config = self.resolve(model, options)

        if model in self._registry:
            logger.info(
                "Replacing authentication config of %s on site %s",
                model._meta.label, self.name
            )
        self._registry[model] = config

        for step in self._registration_steps:
            step(model, config)

        model_configured.send(sender=model, config=config, site=self)
        return config

    def unregister(self, model: Type[models.Model]) -> None:
        if model not in self._registry:
            raise NotRegistered(
                f'The model {model.__name__} is not registered',
                details={'model': model._meta.label}
            )
        del self._registry[model]

    def is_registered(self, model: Type[models.Model]) -> bool:
        return model in self._registry

    def get_config(self, model: Type[models.Model]) -> AuthenticConfig:
        """Return the configuration ``model`` was registered with."""
        try:
            return self._registry[model]
        except KeyError:
            raise NotRegistered(
                f'The model {model.__name__} is not registered',
                details={'model': model._meta.label}
            ) from None

    def registered_models(self) -> List[Type[models.Model]]:
        """Registered models, sorted by label."""
        return sorted(self._registry, key=lambda model: model._meta.label)


site = AuthenticSite()


def acts_as_authentic(site: AuthenticSite = site, **options: Any):
    """
    Class decorator registering a model as authenticable.

    Options not given are derived from the model's columns.
    """
    def _model_wrapper(model: Type[models.Model]) -> Type[models.Model]:
        site.register(model, **options)
        return model

    return _model_wrapper
