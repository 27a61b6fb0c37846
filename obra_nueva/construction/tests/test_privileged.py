# construction/tests/test_privileged.py
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from construction.models import Construction, Service


class ConstructionDistributorTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.token = 'testtoken'
        self.url = reverse('construction_distributor')
        self.construction = Construction.objects.create(name='Obra1')

    def auth(self, token=None):
        return {'HTTP_AUTHORIZATION': f'Bearer {token or self.token}'}

    def test_assign_distributor(self):
        payload = {'construction_id': self.construction.id, 'distributor_id': 4}
        resp = self.client.post(self.url, payload, format='json', **self.auth())

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data['message'], 'Distribuidora actualizada correctamente')
        self.assertEqual(resp.data['data']['distributor_id'], 4)
        self.construction.refresh_from_db()
        self.assertEqual(self.construction.distributor_id, 4)

    def test_null_distributor_clears_it(self):
        Construction.objects.filter(id=self.construction.id).update(distributor_id=4)

        payload = {'construction_id': self.construction.id, 'distributor_id': None}
        resp = self.client.post(self.url, payload, format='json', **self.auth())

        self.assertEqual(resp.status_code, 200)
        self.construction.refresh_from_db()
        self.assertIsNone(self.construction.distributor_id)

    def test_missing_token(self):
        resp = self.client.post(self.url, {'construction_id': self.construction.id, 'distributor_id': 4}, format='json')

        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data['error'], 'No autorizado')

    def test_wrong_token(self):
        payload = {'construction_id': self.construction.id, 'distributor_id': 4}
        resp = self.client.post(self.url, payload, format='json', **self.auth('nope'))

        self.assertEqual(resp.status_code, 401)
        self.construction.refresh_from_db()
        self.assertIsNone(self.construction.distributor_id)

    def test_bad_token_checked_before_method(self):
        resp = self.client.get(self.url)
        self.assertEqual(resp.status_code, 401)

        resp = self.client.get(self.url, **self.auth())
        self.assertEqual(resp.status_code, 405)

    def test_distributor_id_must_be_sent(self):
        resp = self.client.post(self.url, {'construction_id': self.construction.id}, format='json', **self.auth())

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error'], 'distributor_id es requerido')

    def test_missing_construction_id(self):
        resp = self.client.post(self.url, {'distributor_id': 4}, format='json', **self.auth())

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error'], 'construction_id es requerido')

    def test_unknown_construction(self):
        resp = self.client.post(self.url, {'construction_id': 9999, 'distributor_id': 4}, format='json', **self.auth())

        self.assertEqual(resp.status_code, 404)
        self.assertFalse(resp.data['success'])


class ServiceTypeTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse('service_type')
        self.service = Service.objects.create(construction=Construction.objects.create(name='Obra1'), type_id=1)
        self.headers = {'HTTP_AUTHORIZATION': 'Bearer testtoken'}

    def test_change_type(self):
        resp = self.client.post(self.url, {'service_id': self.service.id, 'type_id': 5}, format='json', **self.headers)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data['data']['type_id'], 5)
        self.assertEqual(resp.data['data']['id'], self.service.id)

    def test_missing_type_id(self):
        resp = self.client.post(self.url, {'service_id': self.service.id}, format='json', **self.headers)

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error'], 'type_id es requerido')

    def test_unknown_service(self):
        resp = self.client.post(self.url, {'service_id': 9999, 'type_id': 5}, format='json', **self.headers)
        self.assertEqual(resp.status_code, 404)

    def test_requires_token(self):
        resp = self.client.post(self.url, {'service_id': self.service.id, 'type_id': 5}, format='json')
        self.assertEqual(resp.status_code, 401)
