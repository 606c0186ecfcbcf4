class TwitReqError(Exception):
    """Base exception for everything that can go wrong while building a
    signed request."""

class ValidationError(TwitReqError, ValueError):
    """An option was missing, had the wrong type, or was outside its
    allowed values. Nothing has been computed when this is raised."""

    def __init__(self, field, msg):
        super(ValidationError, self).__init__(field, msg)
        self.field = field
        self.msg = msg

    def __str__(self):
        return "%s: %s" % (self.field, self.msg)

class UnsupportedSignatureMethodError(TwitReqError):
    def __init__(self, signature_method):
        super(UnsupportedSignatureMethodError, self).__init__(signature_method)
        self.signature_method = signature_method

    def __str__(self):
        return "HMAC-SHA1 is the only supported signature method, not %r" % (self.signature_method,)
