import warnings

# Google SDK FutureWarning messages about interpreter deprecation
# clutter the wizard prompts.
warnings.filterwarnings("ignore", category=FutureWarning, module="google.api_core")
warnings.filterwarnings("ignore", category=FutureWarning, module="google.cloud")
