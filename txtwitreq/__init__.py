__all__ = ['build_request', 'request', 'RequestDescriptor', 'RequestOptions', 'Defaults', 'DEFAULTS',
           'StringProducer', 'TwitReqError', 'ValidationError', 'UnsupportedSignatureMethodError']

from txtwitreq._version import __version__

from zope.interface import implementer

from twisted.internet.defer import maybeDeferred, succeed
from twisted.logger import Logger
from twisted.web.http_headers import Headers
from twisted.web.iweb import IBodyProducer

from txtwitreq import oauth
from txtwitreq.errors import TwitReqError, UnsupportedSignatureMethodError, ValidationError
from txtwitreq.options import DEFAULTS, Defaults, RequestOptions

USER_AGENT = 'txtwitreq v%s' % (__version__,)

log = Logger()

@implementer(IBodyProducer)
class StringProducer(object):
    """
    If you have a string that you want to pass as the body of your
    HTTP request, wrap it in an instance of StringProducer and pass
    that as the `bodyProducer' argument of Agent.request().
    """
    def __init__(self, body):
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.body = body
        self.length = len(body)

    def startProducing(self, consumer):
        consumer.write(self.body)
        return succeed(None)

    def pauseProducing(self):
        pass

    def resumeProducing(self):
        pass

    def stopProducing(self):
        pass

class RequestDescriptor(object):
    """
    A signed request, ready to be sent. method, path (including the
    query string), hostname and headers are what an HTTP client needs;
    url and body are there for clients that want a full URI and a
    request body. signature, timestamp, nonce and base_string are kept
    for debugging.
    """
    def __init__(self, method, path, hostname, headers, url, body, signature, timestamp, nonce, base_string):
        self.method = method
        self.path = path
        self.hostname = hostname
        self.headers = headers
        self.url = url
        self.body = body
        self.signature = signature
        self.timestamp = timestamp
        self.nonce = nonce
        self.base_string = base_string

    def to_dict(self):
        return {
            'method': self.method,
            'path': self.path,
            'hostname': self.hostname,
            'headers': dict(self.headers),
        }

    def http_headers(self):
        """ The headers as a twisted.web.http_headers.Headers, for Agent.request(). """
        return Headers(dict((k.encode('ascii'), [v.encode('utf-8')]) for k, v in self.headers.items()))

    def body_producer(self):
        """ A StringProducer over the form-encoded body, or None if there is no body. """
        if not self.body:
            return None
        return StringProducer(self.body)

    def __repr__(self):
        return "<RequestDescriptor %s %s%s>" % (self.method, self.hostname, self.path)

def _trace(verbose, stage, fmt, **kwargs):
    if verbose:
        log.info(fmt, stage=stage, **kwargs)

def build_request(options, defaults=DEFAULTS, timestamp=None, nonce=None, clock=None):
    """
    Validate options, sign the request and return a RequestDescriptor.

    options is a RequestOptions or a dict of options (see
    RequestOptions.from_dict). defaults supplies whatever options leave
    unset. timestamp and nonce are normally generated fresh for every
    call; pass them in only to reproduce a known signature. clock, if
    given, has a seconds() method and is used for the timestamp.

    Raises ValidationError before doing anything if the options are bad,
    and UnsupportedSignatureMethodError before signing anything if a
    signature method other than HMAC-SHA1 was asked for.
    """
    if not isinstance(options, RequestOptions):
        options = RequestOptions.from_dict(options)
    options.validate()

    verbose = options.verbose
    _trace(verbose, 'start', "Starting txtwitreq ...")

    options = options.with_defaults(defaults)

    if options.signature_method != 'HMAC-SHA1':
        raise UnsupportedSignatureMethodError(options.signature_method)

    _trace(verbose, 'options', "Using options: {options!r}", options=options)

    base_url = options.base_url

    if timestamp is None:
        timestamp = oauth.generate_timestamp(clock)
    _trace(verbose, 'timestamp', "Generated timestamp: {timestamp}", timestamp=timestamp)

    if nonce is None:
        nonce = oauth.generate_nonce()
    _trace(verbose, 'nonce', "Generated nonce: {nonce}", nonce=nonce)

    oauth_params = {
        'oauth_consumer_key': options.consumer_key,
        'oauth_nonce': nonce,
        'oauth_signature_method': options.signature_method,
        'oauth_timestamp': timestamp,
        'oauth_token': options.token,
        'oauth_version': options.oauth_version,
    }

    sig_params = []
    for params in (options.query_params, options.body_params):
        if params:
            sig_params.extend(params.items())
    sig_params.extend(oauth_params.items())

    base_string, signature = oauth.generate_signature(
        options.method, base_url, sig_params, options.consumer_secret, options.token_secret)
    _trace(verbose, 'signature', "Generated base sig string: {base_string}, OAuth sig is: {signature}",
           base_string=base_string, signature=signature)

    oauth_params['oauth_signature'] = signature
    auth_header = oauth.authorization_header(oauth_params)
    _trace(verbose, 'header', "Authorization header value is: {header}", header=auth_header)

    query = oauth.query_string(options.query_params)
    _trace(verbose, 'query_string', "Query string value is: {query_string}", query_string=query)

    headers = {
        'Authorization': auth_header,
        'Accept': '*/*',
        'Connection': 'close',
        'User-Agent': USER_AGENT,
        'Content-Type': 'application/x-www-form-urlencoded',
        'Host': options.host,
    }

    descriptor = RequestDescriptor(
        method=options.method,
        path=options.path + query,
        hostname=options.host,
        headers=headers,
        url=base_url + query,
        body=oauth.form_body(options.body_params),
        signature=signature,
        timestamp=timestamp,
        nonce=nonce,
        base_string=base_string,
        )
    _trace(verbose, 'complete', "Complete! Generated request object is: {descriptor!r}", descriptor=descriptor)
    return descriptor

def request(options, defaults=DEFAULTS, timestamp=None, nonce=None, clock=None):
    """
    Like build_request(), but returns a Deferred which fires with the
    RequestDescriptor, or errbacks with the ValidationError or
    UnsupportedSignatureMethodError.
    """
    return maybeDeferred(build_request, options, defaults=defaults, timestamp=timestamp, nonce=nonce, clock=clock)
