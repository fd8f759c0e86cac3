import hypothesis

# First calls into torch are slow enough to trip the default deadline.
hypothesis.settings.register_profile("splineface", deadline=None)
hypothesis.settings.load_profile("splineface")
