class InvalidStatusTransition(Exception):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move donation from {current} to {requested}")
