# complaints.py
# Complaint API calls used by the admin, employee and worker screens
import json

from .api import ApiClient, AUTH_TOKEN_KEY, LOGIN_PATH, REMEMBERED_USER_KEY

STATUS_OPENED = 'Opened'
STATUS_PROCESSING = 'Processing'
STATUS_CLOSED = 'Closed'

# Landing page per role after a successful login
DASHBOARD_PATHS = {
    'admin': '/admin/status/new-complaints',
    'worker': '/worker/complaints',
    'employee': '/employee/complaints',
}


class ComplaintApi:
    def __init__(self, client=None):
        self.client = client or ApiClient()

    # Session
    def login(self, employee_id, password, admin=False, remember=False):
        """Log in, store the access token and move to the role's dashboard."""
        path = '/admin/login/' if admin else '/login/'
        data = self.client.post(path, json={'employee_id': employee_id, 'password': password}).json()
        user = data['user']

        self.client.local_storage.set_item(AUTH_TOKEN_KEY, data['access'])
        if remember:
            self.client.local_storage.set_item(
                REMEMBERED_USER_KEY, json.dumps({'employee_id': user['employee_id'], 'role': user['role']})
            )
        self.client.navigate(DASHBOARD_PATHS.get(user['role'], LOGIN_PATH))
        return user

    def logout(self):
        self.client.local_storage.remove_item(AUTH_TOKEN_KEY)
        self.client.local_storage.remove_item(REMEMBERED_USER_KEY)
        self.client.navigate(LOGIN_PATH)

    def remembered_user(self):
        value = self.client.local_storage.get_item(REMEMBERED_USER_KEY)
        return json.loads(value) if value else None

    def me(self):
        return self.client.get('/me/').json()

    # Complaints
    def complaints(self, status=None):
        params = {'status': status} if status else None
        return self.client.get('/complaints/', params=params).json()

    def my_complaints(self):
        return self.complaints()

    def closed_complaints(self):
        return [complaint for complaint in self.my_complaints() if complaint['status'] == STATUS_CLOSED]

    def complaint(self, pk):
        return self.client.get(f'/complaints/{pk}/').json()

    def file_complaint(self, complaint_asset, complaint_details, employee_phone=None, employee_location=None):
        payload = {'complaint_asset': complaint_asset, 'complaint_details': complaint_details}
        if employee_phone:
            payload['employee_phone'] = employee_phone
        if employee_location:
            payload['employee_location'] = employee_location
        return self.client.post('/complaints/', json=payload).json()['data']

    def assign(self, pk, worker_id):
        return self.client.post(f'/complaints/{pk}/assign/', json={'worker_id': worker_id}).json()['data']

    def resolve(self, pk):
        return self.client.post(f'/complaints/{pk}/resolve/').json()['data']

    def give_feedback(self, pk, feedback):
        return self.client.post(f'/complaints/{pk}/feedback/', json={'feedback': feedback}).json()['data']

    def stats(self):
        return self.client.get('/complaints/stats/').json()

    # Workers
    def workers(self):
        return self.client.get('/workers/').json()
