from datetime import datetime, timedelta, timezone as dt_timezone
from unittest import mock

from django.test import TestCase, override_settings
from django.utils import timezone

from complaints.models import Complaint, ComplaintStateError, Employee

from .helpers import make_complaint, make_user


class EmployeeModelTests(TestCase):
    def test_create_user_requires_employee_id(self):
        with self.assertRaises(ValueError):
            Employee.objects.create_user('', 'secret')

    def test_create_user_hashes_password(self):
        user = make_user('emp01')
        self.assertNotEqual(user.password, 'Passw0rd!')
        self.assertTrue(user.check_password('Passw0rd!'))
        self.assertEqual(user.role, Employee.ROLE_EMPLOYEE)

    def test_create_superuser_is_admin(self):
        admin = Employee.objects.create_superuser('root', 'Passw0rd!', employee_name='Root')
        self.assertTrue(admin.is_admin)
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.has_perm('complaints.change_complaint'))

    def test_workers_lists_only_active_workers(self):
        make_user('emp01')
        worker = make_user('wrk01', role=Employee.ROLE_WORKER)
        make_user('wrk02', role=Employee.ROLE_WORKER, is_active=False)
        self.assertEqual(list(Employee.objects.workers()), [worker])

    def test_display_name_falls_back_to_employee_id(self):
        user = make_user('emp01', employee_name='')
        self.assertEqual(user.display_name, 'emp01')


class ComplaintNumberTests(TestCase):
    def test_complaint_ids_are_sequential_per_day(self):
        employee = make_user('emp01')
        today = timezone.localdate().strftime('%Y%m%d')

        first = make_complaint(employee)
        second = make_complaint(employee)

        self.assertEqual(first.complaint_id, f'{today}-001')
        self.assertEqual(second.complaint_id, f'{today}-002')

    def test_numbering_restarts_each_day(self):
        employee = make_user('emp01')
        yesterday = (timezone.localdate() - timedelta(days=1)).strftime('%Y%m%d')
        make_complaint(employee, complaint_id=f'{yesterday}-001')
        make_complaint(employee, complaint_id=f'{yesterday}-002')

        complaint = make_complaint(employee)

        self.assertEqual(complaint.complaint_id, f"{timezone.localdate().strftime('%Y%m%d')}-001")

    @override_settings(TIME_ZONE='Asia/Kolkata')
    def test_number_uses_local_date(self):
        # 20:00 UTC on July 21 is already July 22 in Kolkata
        utc_evening = datetime(2024, 7, 21, 20, 0, tzinfo=dt_timezone.utc)
        with mock.patch('django.utils.timezone.now', return_value=utc_evening):
            complaint = make_complaint(make_user('emp01'))

        self.assertEqual(complaint.complaint_id, '20240722-001')

    def test_existing_complaint_id_is_kept_on_save(self):
        complaint = make_complaint(make_user('emp01'))
        original = complaint.complaint_id
        complaint.complaint_details = 'Updated'
        complaint.save()
        self.assertEqual(complaint.complaint_id, original)


class ComplaintLifecycleTests(TestCase):
    def setUp(self):
        self.employee = make_user('emp01')
        self.worker = make_user('wrk01', role=Employee.ROLE_WORKER)
        self.complaint = make_complaint(self.employee)

    def test_new_complaint_is_opened(self):
        self.assertEqual(self.complaint.status, Complaint.STATUS_OPENED)
        self.assertIsNone(self.complaint.attended_by)

    def test_assign_moves_to_processing(self):
        self.complaint.assign(self.worker)
        self.complaint.refresh_from_db()
        self.assertEqual(self.complaint.status, Complaint.STATUS_PROCESSING)
        self.assertEqual(self.complaint.attended_by, self.worker)
        self.assertIsNotNone(self.complaint.assigned_date)

    def test_assign_rejects_non_workers(self):
        with self.assertRaises(ComplaintStateError):
            self.complaint.assign(self.employee)

    def test_assign_rejects_already_assigned(self):
        self.complaint.assign(self.worker)
        with self.assertRaises(ComplaintStateError):
            self.complaint.assign(self.worker)

    def test_close_requires_processing(self):
        with self.assertRaises(ComplaintStateError):
            self.complaint.close()

        self.complaint.assign(self.worker)
        self.complaint.close()
        self.assertEqual(self.complaint.status, Complaint.STATUS_CLOSED)
        self.assertIsNotNone(self.complaint.closed_date)

    def test_feedback_only_on_closed(self):
        with self.assertRaises(ComplaintStateError):
            self.complaint.add_feedback('Thanks')

        self.complaint.assign(self.worker)
        self.complaint.close()
        with self.assertRaises(ComplaintStateError):
            self.complaint.add_feedback('   ')

        self.complaint.add_feedback(' Fixed quickly ')
        self.assertEqual(self.complaint.feedback, 'Fixed quickly')

    def test_feedback_is_given_once(self):
        self.complaint.assign(self.worker)
        self.complaint.close()
        self.complaint.add_feedback('Fixed quickly')

        with self.assertRaises(ComplaintStateError):
            self.complaint.add_feedback('Actually it broke again')
        self.complaint.refresh_from_db()
        self.assertEqual(self.complaint.feedback, 'Fixed quickly')
