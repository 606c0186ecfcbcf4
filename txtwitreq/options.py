from collections.abc import Mapping
import collections

from txtwitreq.errors import ValidationError
from txtwitreq.oauth import SUPPORTED_METHODS

Defaults = collections.namedtuple('Defaults', ['protocol', 'host', 'signature_method', 'oauth_version'])

DEFAULTS = Defaults(
    protocol='https',
    host='api.twitter.com',
    signature_method='HMAC-SHA1',
    oauth_version='1.0',
    )

REQUIRED = ('consumer_key', 'consumer_secret', 'token', 'token_secret', 'method', 'path')
OPTIONAL_STRINGS = ('host', 'protocol', 'signature_method', 'oauth_version')
PARAM_MAPPINGS = ('query_params', 'body_params')
FIELDS = REQUIRED + OPTIONAL_STRINGS + PARAM_MAPPINGS + ('verbose',)

# The option names as callers of the original JavaScript library spelled
# them, and the shorter spellings, mapped to our attribute names.
OPTION_ALIASES = {
    'oAuthConsumerKey': 'consumer_key',
    'consumerKey': 'consumer_key',
    'oAuthConsumerSecret': 'consumer_secret',
    'consumerSecret': 'consumer_secret',
    'oAuthToken': 'token',
    'token': 'token',
    'oAuthTokenSecret': 'token_secret',
    'tokenSecret': 'token_secret',
    'method': 'method',
    'path': 'path',
    'host': 'host',
    'protocol': 'protocol',
    'oAuthSignatureMethod': 'signature_method',
    'signatureMethod': 'signature_method',
    'oAuthVersion': 'oauth_version',
    'queryParams': 'query_params',
    'bodyParams': 'body_params',
    'verbose': 'verbose',
}

def _check_string(name, value):
    if not isinstance(value, str):
        raise ValidationError(name, "must be a string, not %s" % (type(value).__name__,))
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        raise ValidationError(name, "must be encodable as utf-8, got %r" % (value,))

class RequestOptions(object):
    """
    Everything needed to sign one request: the four OAuth credentials,
    the HTTP method and path, and optionally host, protocol, signature
    method, OAuth version, query parameters and body parameters.

    Query parameters end up both in the query string and in the
    signature. Body parameters are signed and sent as the form-encoded
    body but never appear in the query string.

    Options left as None are filled in from a Defaults record by
    with_defaults(). Nothing is checked until validate() is called.
    """
    def __init__(self, consumer_key=None, consumer_secret=None, token=None, token_secret=None,
                 method=None, path=None, host=None, protocol=None, signature_method=None,
                 oauth_version=None, query_params=None, body_params=None, verbose=False):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token
        self.token_secret = token_secret
        self.method = method
        self.path = path
        self.host = host
        self.protocol = protocol
        self.signature_method = signature_method
        self.oauth_version = oauth_version
        self.query_params = query_params
        self.body_params = body_params
        self.verbose = verbose

    @classmethod
    def from_dict(cls, data):
        """
        data is a dict of options keyed either by our attribute names or
        by the camelCase names (oAuthConsumerKey, queryParams, ...).
        Unknown keys are a ValidationError.
        """
        if not isinstance(data, Mapping):
            raise ValidationError('options', "must be a mapping, not %s" % (type(data).__name__,))
        kwargs = {}
        for k, v in data.items():
            name = OPTION_ALIASES.get(k, k)
            if name not in FIELDS:
                raise ValidationError(k, "is not a recognized option")
            if name in kwargs:
                raise ValidationError(k, "was given more than once")
            kwargs[name] = v
        return cls(**kwargs)

    def validate(self):
        """ Raise ValidationError for the first option that is missing or wrong. """
        for name in REQUIRED:
            value = getattr(self, name)
            if value is None:
                raise ValidationError(name, "is required")
            _check_string(name, value)

        for name in OPTIONAL_STRINGS:
            value = getattr(self, name)
            if value is not None:
                _check_string(name, value)

        if self.method not in SUPPORTED_METHODS:
            raise ValidationError('method', "must be one of %s, not %r" % (', '.join(SUPPORTED_METHODS), self.method))

        if not self.path.startswith('/'):
            raise ValidationError('path', "must begin with '/', not %r" % (self.path,))

        for name in PARAM_MAPPINGS:
            params = getattr(self, name)
            if params is None:
                continue
            if not isinstance(params, Mapping):
                raise ValidationError(name, "must be a mapping, not %s" % (type(params).__name__,))
            for k, v in params.items():
                if not isinstance(k, str) or not isinstance(v, str):
                    raise ValidationError(name, "keys and values must be strings, got %r: %r" % (k, v))
                if k == 'oauth_signature':
                    raise ValidationError(name, "oauth_signature is computed here and can't be passed in")
                try:
                    k.encode('utf-8')
                    v.encode('utf-8')
                except UnicodeEncodeError:
                    raise ValidationError(name, "keys and values must be encodable as utf-8, got %r: %r" % (k, v))

        if self.verbose is None:
            self.verbose = False
        if not isinstance(self.verbose, bool):
            raise ValidationError('verbose', "must be a bool, not %s" % (type(self.verbose).__name__,))

        return self

    def with_defaults(self, defaults=DEFAULTS):
        """ Return a copy with every unset optional string taken from defaults. """
        filled = RequestOptions(**vars(self))
        for name in OPTIONAL_STRINGS:
            if getattr(filled, name) is None:
                setattr(filled, name, getattr(defaults, name))
        return filled

    @property
    def base_url(self):
        return "%s://%s%s" % (self.protocol, self.host, self.path)

    def __repr__(self):
        # Secrets stay out of reprs, and therefore out of logs.
        return "<RequestOptions %s %s://%s%s consumer_key=%r token=%r query_params=%r body_params=%r>" % (
            self.method, self.protocol, self.host, self.path, self.consumer_key, self.token,
            self.query_params, self.body_params)
