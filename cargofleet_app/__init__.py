"""
cargofleet_app: container and container-ship capacity engine.
"""
