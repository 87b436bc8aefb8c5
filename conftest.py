import os

from hypothesis import settings, Phase

settings.register_profile("ci", max_examples=1000)
settings.register_profile("dev", max_examples=20, phases=[p for p in Phase if p != Phase.shrink])
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
