# construction/tests/test_api.py
from types import SimpleNamespace

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from construction.config import IntegrationConfig, load_integration_config
from construction.utils import generate_document_filename


def settings_source(**overrides):
    values = {
        'HUBSPOT_ACCESS_TOKEN': 'tok',
        'SLACK_WEBHOOK_URL': 'https://hooks.slack.test/x',
        'SUPABASE_URL': 'https://project.supabase.test/',
        'SUPABASE_SERVICE_ROLE_KEY': 'key',
        'INTERNAL_API_TOKEN': 'internal',
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class ConfigTests(SimpleTestCase):

    def test_loaded_at_startup(self):
        config = apps.get_app_config('construction').integration
        self.assertIsInstance(config, IntegrationConfig)
        self.assertEqual(config.internal_api_token, 'testtoken')

    def test_defaults(self):
        config = load_integration_config(settings_source())

        self.assertEqual(config.hubspot_owner_id, '158118434')
        self.assertEqual(config.hubspot_deal_stage, '205747816')
        self.assertEqual(config.hubspot_api_base, 'https://api.hubapi.com')
        self.assertEqual(config.supabase_url, 'https://project.supabase.test')

    def test_missing_values_listed(self):
        with self.assertRaises(ImproperlyConfigured) as ctx:
            load_integration_config(settings_source(SLACK_WEBHOOK_URL='', INTERNAL_API_TOKEN=''))

        self.assertIn('SLACK_WEBHOOK_URL', str(ctx.exception))
        self.assertIn('INTERNAL_API_TOKEN', str(ctx.exception))

    def test_timeout_must_be_positive(self):
        with self.assertRaises(ImproperlyConfigured):
            load_integration_config(settings_source(INTEGRATION_TIMEOUT=0))


class FilenameTests(SimpleTestCase):

    def test_keeps_extension(self):
        name = generate_document_filename(7, 3, 'Plano Final.PDF')
        self.assertRegex(name, r'^7_3_\d+\.pdf$')

    def test_without_extension(self):
        self.assertRegex(generate_document_filename(7, 3, 'README'), r'^7_3_\d+$')


class EnvelopeTests(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_preflight(self):
        resp = self.client.options(
            reverse('hubspot_deal_create'),
            HTTP_ORIGIN='https://app.example.com',
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b'')
        self.assertEqual(resp['Access-Control-Allow-Origin'], '*')

    def test_plain_options_on_gated_view(self):
        resp = self.client.options(reverse('construction_distributor'))

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.content, b'')

    def test_cors_header_on_response(self):
        resp = self.client.get(reverse('hubspot_deal_update'), HTTP_ORIGIN='https://app.example.com')

        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp['Access-Control-Allow-Origin'], '*')

    def test_malformed_json(self):
        resp = self.client.post(
            reverse('hubspot_deal_create'), data='{"constructionData": ', content_type='application/json'
        )

        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()['success'])

    def test_put_not_allowed(self):
        resp = self.client.put(reverse('create_user'), {}, format='json')

        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp.json(), {'success': False, 'error': 'Method not allowed'})
