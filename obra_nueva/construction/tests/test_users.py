# construction/tests/test_users.py
from unittest import mock

from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from construction.models import UserProfile
from construction.services import CompensatedStep, run_compensated


def supabase_response(status_code=200, body=None):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body or {}
    response.text = str(body or '')
    return response


class RunCompensatedTests(SimpleTestCase):

    def test_both_steps_succeed(self):
        undo = mock.Mock()
        first = CompensatedStep('thing', action=lambda: 'a', compensate=undo)

        self.assertEqual(run_compensated(first, lambda a: a + 'b'), ('a', 'ab'))
        undo.assert_not_called()

    def test_second_failure_compensates_and_reraises(self):
        undo = mock.Mock()
        first = CompensatedStep('thing', action=lambda: 'a', compensate=undo)

        def boom(_):
            raise ValueError('second failed')

        with self.assertRaisesMessage(ValueError, 'second failed'):
            run_compensated(first, boom)
        undo.assert_called_once_with('a')

    def test_failing_compensation_logged_as_inconsistent(self):
        first = CompensatedStep('thing', action=lambda: 'a', compensate=mock.Mock(side_effect=RuntimeError('gone')))

        def boom(_):
            raise ValueError('second failed')

        with self.assertLogs('construction.services.saga', level='CRITICAL') as logs:
            with self.assertRaises(ValueError):
                run_compensated(first, boom)
        self.assertIn('INCONSISTENT STATE', logs.output[0])

    def test_first_failure_skips_everything(self):
        undo = mock.Mock()
        second = mock.Mock()
        first = CompensatedStep('thing', action=mock.Mock(side_effect=RuntimeError('nope')), compensate=undo)

        with self.assertRaises(RuntimeError):
            run_compensated(first, second)
        undo.assert_not_called()
        second.assert_not_called()


@mock.patch('construction.clients.supabase_auth.requests.delete')
@mock.patch('construction.clients.supabase_auth.requests.post')
class CreateUserTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.url = reverse('create_user')
        self.payload = {'email': 'ana@example.com', 'password': 's3cret!', 'username': 'Ana', 'companyId': '12'}

    def test_create_user(self, post_mock, delete_mock):
        post_mock.return_value = supabase_response(200, {'id': 'uuid-1', 'email': 'ana@example.com'})

        resp = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data['user'], {'id': 'uuid-1', 'email': 'ana@example.com', 'username': 'Ana', 'company_id': 12})
        profile = UserProfile.objects.get(id='uuid-1')
        self.assertEqual(profile.company_id, 12)

        self.assertEqual(post_mock.call_args.args[0], 'https://project.supabase.test/auth/v1/admin/users')
        self.assertTrue(post_mock.call_args.kwargs['json']['email_confirm'])
        delete_mock.assert_not_called()

    def test_missing_fields(self, post_mock, delete_mock):
        resp = self.client.post(self.url, {'email': 'ana@example.com'}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error'], 'Missing required fields')
        self.assertIn('companyId', resp.data['details'])
        post_mock.assert_not_called()

    def test_company_id_must_be_integer(self, post_mock, delete_mock):
        resp = self.client.post(self.url, {**self.payload, 'companyId': 'doce'}, format='json')

        self.assertEqual(resp.status_code, 400)
        post_mock.assert_not_called()

    def test_identity_failure(self, post_mock, delete_mock):
        post_mock.return_value = supabase_response(422, {'msg': 'User already registered'})

        resp = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error'], 'Error creating user in auth')
        self.assertEqual(resp.data['details'], 'User already registered')
        self.assertFalse(UserProfile.objects.exists())

    def test_profile_failure_deletes_identity(self, post_mock, delete_mock):
        UserProfile.objects.create(id='uuid-taken', username='Otro', company_id=1)
        post_mock.return_value = supabase_response(200, {'id': 'uuid-taken'})
        delete_mock.return_value = supabase_response(200)

        resp = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data['error'], 'Error creating user record')
        self.assertTrue(resp.data['details'])
        self.assertEqual(delete_mock.call_args.args[0], 'https://project.supabase.test/auth/v1/admin/users/uuid-taken')

    def test_profile_failure_reported_even_if_delete_fails(self, post_mock, delete_mock):
        UserProfile.objects.create(id='uuid-taken', username='Otro', company_id=1)
        post_mock.return_value = supabase_response(200, {'id': 'uuid-taken'})
        delete_mock.return_value = supabase_response(500, {'msg': 'boom'})

        with self.assertLogs('construction.services.saga', level='CRITICAL'):
            resp = self.client.post(self.url, self.payload, format='json')

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data['error'], 'Error creating user record')
        delete_mock.assert_called_once()
