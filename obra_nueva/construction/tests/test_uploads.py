# construction/tests/test_uploads.py
import os
import tempfile
from unittest import mock

from django.conf import settings
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from construction.constants import UPLOAD_STEP_NOTIFY, UPLOAD_STEP_RECORD, UPLOAD_STEP_STORE
from construction.models import (
    Construction,
    Document,
    DocumentationType,
    Service,
    ServiceStatus,
    ServiceTypeStatus,
)


def webhook_response(status_code=200, text='ok'):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    return response


@mock.patch('construction.tasks.sync_document_to_hubspot_task.delay')
@mock.patch('construction.clients.slack.requests.post')
class DocumentUploadTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.construction = Construction.objects.create(name='Obra1')
        self.service = Service.objects.create(construction=self.construction, type_id=1)
        self.doc_type = DocumentationType.objects.create(name='Boletín eléctrico', hubspot_document='boletin_url')
        self.url = reverse('service_documents', kwargs={'service_id': self.service.id})

    def pdf(self, name='boletin.pdf'):
        return SimpleUploadedFile(name, b'%PDF-1.4 test', content_type='application/pdf')

    def test_file_upload_runs_whole_chain(self, slack_post, delay_mock):
        slack_post.return_value = webhook_response()

        resp = self.client.post(
            self.url,
            {'file': self.pdf(), 'document_type_id': self.doc_type.id, 'user_name': 'Ana'},
            format='multipart',
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data['notification']['type'], 'success')

        document = Document.objects.get(service=self.service)
        self.assertTrue(document.file.name.startswith(f'documents/{self.service.id}/{self.service.id}_{self.doc_type.id}_'))
        self.assertTrue(document.file.name.endswith('.pdf'))
        self.assertTrue(document.link.startswith('http://testserver/media/documents/'))
        self.assertEqual(resp.data['downloadUrl'], document.link)

        message = slack_post.call_args.kwargs['json']
        self.assertIn('Obra1', str(message))
        self.assertIn('Boletín eléctrico', str(message))
        delay_mock.assert_called_once_with(document.id)

    def test_text_only_document(self, slack_post, delay_mock):
        slack_post.return_value = webhook_response()

        resp = self.client.post(
            self.url,
            {'document_type_id': self.doc_type.id, 'content_text': 'CUPS ES0021000000000000XX'},
            format='multipart',
        )

        self.assertEqual(resp.status_code, 200)
        document = Document.objects.get(service=self.service)
        self.assertFalse(document.file)
        self.assertEqual(document.content_text, 'CUPS ES0021000000000000XX')

    def test_nothing_to_upload(self, slack_post, delay_mock):
        resp = self.client.post(self.url, {'document_type_id': self.doc_type.id}, format='multipart')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['notification']['type'], 'error')
        self.assertFalse(Document.objects.exists())
        slack_post.assert_not_called()

    def test_unknown_service(self, slack_post, delay_mock):
        url = reverse('service_documents', kwargs={'service_id': 4040})
        resp = self.client.post(url, {'file': self.pdf(), 'document_type_id': self.doc_type.id}, format='multipart')

        self.assertEqual(resp.status_code, 404)

    def test_store_failure_stops_chain(self, slack_post, delay_mock):
        with mock.patch('django.db.models.fields.files.FieldFile.save', side_effect=OSError('disk full')):
            resp = self.client.post(
                self.url, {'file': self.pdf(), 'document_type_id': self.doc_type.id}, format='multipart'
            )

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data['step'], UPLOAD_STEP_STORE)
        self.assertEqual(resp.data['details'], 'disk full')
        self.assertEqual(resp.data['notification']['type'], 'error')
        self.assertFalse(Document.objects.exists())
        slack_post.assert_not_called()
        delay_mock.assert_not_called()

    @override_settings(MEDIA_ROOT=tempfile.mkdtemp(prefix='obra_nueva_media_'))
    def test_record_failure_keeps_stored_file(self, slack_post, delay_mock):
        with mock.patch('construction.models.Document.save', side_effect=RuntimeError('insert refused')):
            resp = self.client.post(
                self.url, {'file': self.pdf(), 'document_type_id': self.doc_type.id}, format='multipart'
            )

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data['step'], UPLOAD_STEP_RECORD)
        stored_dir = os.path.join(settings.MEDIA_ROOT, 'documents', str(self.service.id))
        stored = os.listdir(stored_dir)
        self.assertEqual(len(stored), 1)
        self.assertTrue(stored[0].startswith(f'{self.service.id}_{self.doc_type.id}_'))
        self.assertFalse(Document.objects.exists())
        slack_post.assert_not_called()
        delay_mock.assert_not_called()

    def test_notify_failure_keeps_record(self, slack_post, delay_mock):
        slack_post.return_value = webhook_response(500, 'down')

        resp = self.client.post(
            self.url, {'file': self.pdf(), 'document_type_id': self.doc_type.id}, format='multipart'
        )

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data['step'], UPLOAD_STEP_NOTIFY)
        self.assertEqual(resp.data['notification']['body'], 'No se pudo notificar la subida')
        self.assertEqual(Document.objects.filter(service=self.service).count(), 1)
        self.assertEqual(slack_post.call_count, 2)
        delay_mock.assert_not_called()

    def test_incidence_resolution_advances_service(self, slack_post, delay_mock):
        slack_post.return_value = webhook_response()
        pending = ServiceStatus.objects.create(name='Sin Gestionar')
        review = ServiceStatus.objects.create(name='En Revisión')
        incidence = ServiceStatus.objects.create(name='Incidencia', is_incidence=True)
        ServiceTypeStatus.objects.create(service_type_id=None, status=pending, orden=0)
        ServiceTypeStatus.objects.create(service_type_id=None, status=review, orden=1)
        self.service.status = incidence
        self.service.previous_status = pending
        self.service.save()

        resp = self.client.post(
            self.url,
            {'file': self.pdf(), 'document_type_id': self.doc_type.id, 'is_incidence_resolution': 'true'},
            format='multipart',
        )

        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data['transition']['transitioned'])
        self.service.refresh_from_db()
        self.assertEqual(self.service.status_id, review.id)
        # leaving the incidence keeps the last on-track status
        self.assertEqual(self.service.previous_status_id, pending.id)
