from twisted.trial import unittest

from txtwitreq.errors import ValidationError
from txtwitreq.options import DEFAULTS, RequestOptions

def valid_options(**kwargs):
    options = dict(consumer_key='ck', consumer_secret='cs', token='tk', token_secret='ts',
                   method='GET', path='/1.1/statuses/show.json')
    options.update(kwargs)
    return RequestOptions(**options)

class FromDictTest(unittest.TestCase):
    def test_camel_case_names(self):
        o = RequestOptions.from_dict({
            'oAuthConsumerKey': 'ck',
            'oAuthConsumerSecret': 'cs',
            'oAuthToken': 'tk',
            'oAuthTokenSecret': 'ts',
            'method': 'POST',
            'path': '/1.1/statuses/update.json',
            'oAuthSignatureMethod': 'HMAC-SHA1',
            'oAuthVersion': '1.0',
            'queryParams': {'include_entities': 'true'},
            'bodyParams': {'status': 'hi'},
            'verbose': True,
            })
        self.assertEqual(o.consumer_key, 'ck')
        self.assertEqual(o.token_secret, 'ts')
        self.assertEqual(o.signature_method, 'HMAC-SHA1')
        self.assertEqual(o.query_params, {'include_entities': 'true'})
        self.assertEqual(o.body_params, {'status': 'hi'})
        self.assertTrue(o.verbose)
        o.validate()

    def test_attribute_names(self):
        o = RequestOptions.from_dict({'consumer_key': 'ck', 'host': 'example.com'})
        self.assertEqual(o.consumer_key, 'ck')
        self.assertEqual(o.host, 'example.com')

    def test_unknown_option(self):
        e = self.assertRaises(ValidationError, RequestOptions.from_dict, {'colour': 'blue'})
        self.assertEqual(e.field, 'colour')

    def test_given_twice(self):
        self.assertRaises(ValidationError, RequestOptions.from_dict, {'consumerKey': 'a', 'oAuthConsumerKey': 'b'})

class ValidateTest(unittest.TestCase):
    def test_valid(self):
        o = valid_options()
        self.assertIdentical(o.validate(), o)

    def test_required(self):
        for name in ('consumer_key', 'consumer_secret', 'token', 'token_secret', 'method', 'path'):
            e = self.assertRaises(ValidationError, valid_options(**{name: None}).validate)
            self.assertEqual(e.field, name)
            self.assertEqual(str(e), '%s: is required' % (name,))

    def test_wrong_type(self):
        e = self.assertRaises(ValidationError, valid_options(token=12345).validate)
        self.assertEqual(e.field, 'token')
        e = self.assertRaises(ValidationError, valid_options(host=['a']).validate)
        self.assertEqual(e.field, 'host')
        e = self.assertRaises(ValidationError, valid_options(verbose='yes').validate)
        self.assertEqual(e.field, 'verbose')

    def test_method(self):
        for method in ('PUT', 'get', 'DELETE'):
            e = self.assertRaises(ValidationError, valid_options(method=method).validate)
            self.assertEqual(e.field, 'method')
        valid_options(method='POST').validate()

    def test_path(self):
        e = self.assertRaises(ValidationError, valid_options(path='statuses').validate)
        self.assertEqual(e.field, 'path')

    def test_params(self):
        e = self.assertRaises(ValidationError, valid_options(query_params=[('id', '210')]).validate)
        self.assertEqual(e.field, 'query_params')
        e = self.assertRaises(ValidationError, valid_options(body_params={'count': 5}).validate)
        self.assertEqual(e.field, 'body_params')

    def test_oauth_signature_param(self):
        for name in ('query_params', 'body_params'):
            e = self.assertRaises(ValidationError, valid_options(**{name: {'oauth_signature': 'x'}}).validate)
            self.assertEqual(e.field, name)

    def test_unencodable_strings(self):
        e = self.assertRaises(ValidationError, valid_options(token_secret='\ud800').validate)
        self.assertEqual(e.field, 'token_secret')
        e = self.assertRaises(ValidationError, valid_options(query_params={'q': '\udfff'}).validate)
        self.assertEqual(e.field, 'query_params')

    def test_verbose_none_is_unset(self):
        o = valid_options(verbose=None).validate()
        self.assertIdentical(o.verbose, False)
        o = RequestOptions.from_dict(dict(vars(valid_options()), verbose=None)).validate()
        self.assertIdentical(o.verbose, False)

    def test_is_a_value_error(self):
        self.assertRaises(ValueError, valid_options(method='PUT').validate)

class DefaultsTest(unittest.TestCase):
    def test_with_defaults(self):
        o = valid_options()
        filled = o.with_defaults()
        self.assertEqual(filled.protocol, 'https')
        self.assertEqual(filled.host, 'api.twitter.com')
        self.assertEqual(filled.signature_method, 'HMAC-SHA1')
        self.assertEqual(filled.oauth_version, '1.0')
        self.assertEqual(filled.base_url, 'https://api.twitter.com/1.1/statuses/show.json')
        self.assertIdentical(o.host, None)

    def test_overrides_win(self):
        filled = valid_options(host='example.com').with_defaults(DEFAULTS._replace(protocol='http'))
        self.assertEqual(filled.base_url, 'http://example.com/1.1/statuses/show.json')

    def test_repr_hides_secrets(self):
        r = repr(valid_options(consumer_secret='SEKRIT1', token_secret='SEKRIT2'))
        self.assertNotIn('SEKRIT', r)
        self.assertIn("consumer_key='ck'", r)
