from django.dispatch import Signal

# Sent after a model's authentication config has been resolved and published.
# Arguments: sender (the model class), config, site
model_configured = Signal()
