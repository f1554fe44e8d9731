# complaint_urls.py
from rest_framework.routers import DefaultRouter
from ..views import ComplaintViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r'complaints', ComplaintViewSet, basename='complaint')

urlpatterns = router.urls

'''
GET  /complaints/                 - list complaints (admin: all, employee: own, worker: assigned)
POST /complaints/                 - file a complaint
GET  /complaints/stats/           - complaint counts per status
GET  /complaints/{id}/            - complaint detail
POST /complaints/{id}/assign/     - assign to a worker
POST /complaints/{id}/resolve/    - close an assigned complaint
POST /complaints/{id}/feedback/   - feedback on a closed complaint
'''
