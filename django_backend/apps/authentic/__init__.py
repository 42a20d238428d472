"""
Authentic Application Module

Resolves the authentication configuration of models that act as
authenticable records: which columns hold the login, the hashed password,
the salt and the remember/single access tokens, how the login is validated,
and how long an inactive record stays logged in.

The authentic app provides:
- Column-based defaults for every authentication option
- A registration site owning the resolved configuration per model
- The ``acts_as_authentic`` model decorator
- Validators and serializers consuming the resolved configuration

Dependencies:
- Django model metadata for column introspection
- Django REST Framework for configuration serialization
"""

__version__ = "1.0.0"

# Application metadata
APP_NAME = "authentic"
APP_VERBOSE_NAME = "Authenticable Models"
