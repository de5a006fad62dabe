#
#
#


class DesecClientException(Exception):
    pass


class DesecClientConstructionFailure(DesecClientException):
    pass


class DesecClientSerializationFailure(DesecClientException):
    pass


class DesecClientTransportFailure(DesecClientException):
    def __init__(self, error):
        super().__init__(f'Request failed: {error}')
        self.error = error


class DesecClientRetriesExhausted(DesecClientException):
    def __init__(self, max_retries):
        super().__init__(
            f'The maximum count of retries ({max_retries}) has been reached'
        )
        self.max_retries = max_retries


class DesecClientRateLimited(DesecClientException):
    """Request was throttled and will not be retried.

    `wait` is the number of seconds the server asked for, or None when the
    Retry-After header was missing or could not be parsed.
    """

    def __init__(self, wait, message):
        if wait is None:
            super().__init__(f'Rate limited: {message}')
        else:
            super().__init__(
                f'Rate limited, need to wait {wait} seconds: {message}'
            )
        self.wait = wait
        self.message = message


class DesecClientUnauthorized(DesecClientException):
    def __init__(self, message=''):
        super().__init__(f'Unauthorized: {message}')
        self.message = message


class DesecClientForbidden(DesecClientException):
    def __init__(self):
        super().__init__('Forbidden')


class DesecClientNotFound(DesecClientException):
    def __init__(self):
        super().__init__('Not Found')


class DesecClientApiError(DesecClientException):
    def __init__(self, status, body):
        super().__init__(f'API returned {status}: {body!r}')
        self.status = status
        self.body = body


class DesecClientUnexpectedStatus(DesecClientException):
    def __init__(self, status, body):
        super().__init__(f'API returned undocumented status {status}: {body!r}')
        self.status = status
        self.body = body


class DesecClientInvalidResponse(DesecClientException):
    def __init__(self, error, body):
        super().__init__(f'Invalid API response ({error}): {body!r}')
        self.error = error
        self.body = body


class DesecClientCannotLogout(DesecClientException):
    def __init__(self):
        super().__init__('Client was not created from credentials')
