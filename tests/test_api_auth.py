from rest_framework import status
from rest_framework.test import APITestCase

from complaints.models import Employee

from .helpers import PASSWORD, bearer, make_user


class LoginApiTests(APITestCase):
    def setUp(self):
        self.employee = make_user('emp01')
        self.admin = make_user('adm01', role=Employee.ROLE_ADMIN)

    def test_employee_login_returns_tokens(self):
        response = self.client.post('/api/v1/login/', {'employee_id': 'emp01', 'password': PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['user']['employee_id'], 'emp01')
        self.assertNotIn('password', response.data['user'])

    def test_wrong_password_is_unauthorized(self):
        response = self.client.post('/api/v1/login/', {'employee_id': 'emp01', 'password': 'nope'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_unknown_user_is_unauthorized(self):
        response = self.client.post('/api/v1/login/', {'employee_id': 'ghost', 'password': PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_missing_fields_is_bad_request(self):
        response = self.client.post('/api/v1/login/', {'employee_id': 'emp01'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_must_use_admin_login(self):
        response = self.client.post('/api/v1/login/', {'employee_id': 'adm01', 'password': PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.post('/api/v1/admin/login/', {'employee_id': 'adm01', 'password': PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['role'], 'admin')

    def test_admin_login_rejects_employees(self):
        response = self.client.post('/api/v1/admin/login/', {'employee_id': 'emp01', 'password': PASSWORD}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class SignupApiTests(APITestCase):
    def test_signup_creates_employee(self):
        response = self.client.post('/api/v1/signup/', {
            'employee_id': 'emp42',
            'password': PASSWORD,
            'employee_name': 'New Hire',
            'employee_department': 'Civil',
            'role': 'admin',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = Employee.objects.get(employee_id='emp42')
        self.assertEqual(user.role, Employee.ROLE_EMPLOYEE)
        self.assertTrue(user.check_password(PASSWORD))

    def test_duplicate_employee_id_conflicts(self):
        make_user('emp42')
        response = self.client.post('/api/v1/signup/', {
            'employee_id': 'emp42', 'password': PASSWORD, 'employee_name': 'Again',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_weak_password_is_rejected(self):
        response = self.client.post('/api/v1/signup/', {
            'employee_id': 'emp43', 'password': 'password', 'employee_name': 'Weak',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data['errors'])


class TokenAuthenticationTests(APITestCase):
    def test_me_requires_token(self):
        response = self.client.get('/api/v1/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_returns_profile(self):
        user = make_user('emp01')
        self.client.credentials(HTTP_AUTHORIZATION=bearer(user))
        response = self.client.get('/api/v1/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['employee_id'], 'emp01')

    def test_invalid_token_is_unauthorized(self):
        self.client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
        response = self.client.get('/api/v1/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_token_of_deactivated_user_is_unauthorized(self):
        user = make_user('emp01')
        token = bearer(user)
        user.deactivate()
        self.client.credentials(HTTP_AUTHORIZATION=token)
        response = self.client.get('/api/v1/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_update_profile(self):
        user = make_user('emp01')
        self.client.credentials(HTTP_AUTHORIZATION=bearer(user))
        response = self.client.put('/api/v1/me/', {'phone': '8888800000'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.phone, '8888800000')

    def test_update_profile_rejects_invalid_values(self):
        user = make_user('emp01', phone='9000000001')
        self.client.credentials(HTTP_AUTHORIZATION=bearer(user))

        response = self.client.put('/api/v1/me/', {'phone': None}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('phone', response.data)

        response = self.client.put('/api/v1/me/', {'email': 'not-an-email'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        user.refresh_from_db()
        self.assertEqual(user.phone, '9000000001')

    def test_update_profile_ignores_role_and_password(self):
        user = make_user('emp01')
        self.client.credentials(HTTP_AUTHORIZATION=bearer(user))
        response = self.client.put('/api/v1/me/', {'role': 'admin', 'password': 'Other1234'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        user.refresh_from_db()
        self.assertEqual(user.role, Employee.ROLE_EMPLOYEE)
        self.assertTrue(user.check_password(PASSWORD))


class TokenRefreshTests(APITestCase):
    def test_refresh_token_from_login_issues_new_access(self):
        make_user('emp01')
        response = self.client.post('/api/v1/login/', {'employee_id': 'emp01', 'password': PASSWORD}, format='json')
        login_access = response.data['access']

        response = self.client.post('/api/v1/token/refresh/', {'refresh': response.data['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertNotEqual(response.data['access'], login_access)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        self.assertEqual(self.client.get('/api/v1/me/').data['employee_id'], 'emp01')

    def test_invalid_refresh_token_is_unauthorized(self):
        response = self.client.post('/api/v1/token/refresh/', {'refresh': 'garbage'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
