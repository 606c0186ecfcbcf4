# OAuth 1.0a HMAC-SHA1 request signing, as described in RFC 5849.
# Only HMAC-SHA1 is implemented.

from pyutil.assertutil import precondition

from txtwitreq.errors import ValidationError

import base64, collections, hashlib, hmac, math, time, uuid
from urllib.parse import quote

SUPPORTED_METHODS = ('GET', 'POST')

# The order in which the oauth_* parameters appear in the Authorization
# header. The server doesn't care, but the output is expected to be stable.
HEADER_PARAMS = (
    'oauth_consumer_key',
    'oauth_nonce',
    'oauth_signature',
    'oauth_signature_method',
    'oauth_timestamp',
    'oauth_token',
    'oauth_version',
    )

EncodedParam = collections.namedtuple('EncodedParam', ['key', 'value'])

def to_unicode(s):
    """
    Convert to unicode, raise TypeError if the bytes aren't utf-8 or the
    str can't be encoded as utf-8 (a lone surrogate, for instance).
    """
    if isinstance(s, str):
        try:
            s.encode('utf-8')
        except UnicodeEncodeError as le:
            raise TypeError('This string can not be encoded as utf-8: %r. The UnicodeEncodeError was: %s' % (s, le,))
        return s
    precondition(isinstance(s, (bytes, bytearray)), "to_unicode() requires str or bytes", s=s)
    try:
        return bytes(s).decode('utf-8')
    except UnicodeDecodeError as le:
        raise TypeError('You are required to pass either a unicode object or a utf-8 string here. You passed a bytes object which contained non-utf-8: %r. The UnicodeDecodeError that resulted from attempting to interpret it as utf-8 was: %s' % (s, le,))

def escape(s):
    """
    Escape a string per RFC 3986, including any /. Everything but
    A-Z a-z 0-9 - _ . ~ is percent-encoded from its utf-8 bytes, so
    unlike a browser's encodeURIComponent the characters !'()* are
    escaped too. A str that can't be utf-8 encoded raises TypeError.
    """
    return quote(to_unicode(s).encode('utf-8'), safe='~')

def encode_param(key, value):
    return EncodedParam(escape(key), escape(value))

def join_params(encoded_params):
    return '&'.join('%s=%s' % (p.key, p.value) for p in encoded_params)

def normalize_parameters(params):
    """
    params is an iterable of raw (key, value) pairs. Returns the
    normalized parameter string: every pair percent-encoded, sorted by
    encoded key and joined with '&'. Duplicate keys are all kept.
    """
    encoded = [encode_param(k, v) for k, v in params]
    # Only the key takes part in the comparison; the sort is stable so
    # pairs with equal keys stay in the order they came in.
    encoded.sort(key=lambda p: p.key)
    return join_params(encoded)

def signing_base(method, url, param_string):
    """
    Returns the signature base string. url is the base URL with no
    query string; it and param_string are escaped here, exactly once.
    """
    if method not in SUPPORTED_METHODS:
        raise ValidationError('method', "must be one of %s, not %r" % (', '.join(SUPPORTED_METHODS), method))
    sig = [
        method.upper(),
        escape(url),
        escape(param_string),
    ]
    return '&'.join(sig)

def sign(raw, consumer_secret, token_secret):
    """
    HMAC-SHA1 over the base string, base64-encoded. The key is the two
    secrets joined with '&', as they are.
    """
    key = '%s&%s' % (consumer_secret, token_secret)
    digest = hmac.new(key.encode('utf-8'), raw.encode('utf-8'), hashlib.sha1).digest()
    return base64.b64encode(digest).decode('ascii')

def generate_signature(method, url, params, consumer_secret, token_secret):
    """
    params holds every parameter that is signed: the caller's query and
    body parameters plus the oauth_* protocol parameters, but never
    oauth_signature. Returns (base_string, signature).
    """
    params = list(params)
    precondition('oauth_signature' not in [k for k, v in params], "oauth_signature can't sign itself", params=params)
    raw = signing_base(method, url, normalize_parameters(params))
    return raw, sign(raw, consumer_secret, token_secret)

def authorization_header(oauth_params):
    """
    oauth_params is a mapping containing all of HEADER_PARAMS. Returns
    the value for the Authorization header.
    """
    missing = [k for k in HEADER_PARAMS if k not in oauth_params]
    precondition(not missing, "missing oauth parameters", missing=missing)

    header_params = (encode_param(k, oauth_params[k]) for k in HEADER_PARAMS)
    return 'OAuth ' + ', '.join('%s="%s"' % (p.key, p.value) for p in header_params)

def form_body(params):
    """ Encode params in the order given, without sorting. """
    if not params:
        return ''
    return join_params(encode_param(k, v) for k, v in params.items())

def query_string(query_params):
    """
    Returns '?' followed by the encoded query parameters in the order
    the mapping yields them, or '' if there are none. The signature is
    computed over the sorted parameters regardless of this order.
    """
    if not query_params:
        return ''
    return '?' + form_body(query_params)

def generate_nonce():
    """ base64 of the 128 random bits of a fresh UUID4 """
    return base64.b64encode(uuid.uuid4().bytes).decode('ascii')

def generate_timestamp(clock=None):
    """
    Unix seconds as a decimal string, rounded to the nearest second with
    halves going up. clock, if given, is anything with a seconds()
    method, such as a reactor or twisted.internet.task.Clock.
    """
    if clock is None:
        now = time.time()
    else:
        now = clock.seconds()
    return str(int(math.floor(now + 0.5)))
