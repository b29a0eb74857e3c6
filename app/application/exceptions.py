class BookingError(RuntimeError):
    """Base class for failures raised while processing a booking."""
    pass


class ServiceNotFoundError(BookingError):
    """Raised when a requested service name has no catalog entry."""

    def __init__(self, service_name: str) -> None:
        super().__init__(f'Service "{service_name}" not found')
        self.service_name = service_name


class EmailDeliveryError(BookingError):
    """Raised when the email collaborator fails to deliver a confirmation."""
    pass
