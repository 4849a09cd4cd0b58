"""
Error taxonomy for the track info pipeline.
Each error carries the HTTP status it is surfaced with.
"""


class TrackInfoError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailable(TrackInfoError):
    """Network/transport failure talking to an upstream API."""
    status_code = 500


class MalformedUpstreamResponse(TrackInfoError):
    """Upstream body could not be decoded into the expected shape."""
    status_code = 500


class NotFound(TrackInfoError):
    status_code = 404
