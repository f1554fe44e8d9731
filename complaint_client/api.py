# api.py
# HTTP client for the complaint API: token injection, retries, auth redirects
import logging
import os
import re
import threading
import time

import requests

from .notifications import Notifier
from .storage import Storage

logger = logging.getLogger('complaint_client')

DEFAULT_BASE_URL = 'http://localhost:6050'
API_PREFIX = '/api/v1'

LOGIN_PATH = '/'

AUTH_TOKEN_KEY = 'authToken'
REMEMBERED_USER_KEY = 'rememberedUser'
AUTH_REDIRECT_KEY = 'auth_redirect_timestamp'

COLD_START_NOTIFICATION = 'cold-start-notification'
AUTH_REDIRECT_NOTIFICATION = 'auth-redirect-notification'

# Any run of repeated /api/v1 segments collapses to a single one
DUPLICATE_PATH_RE = re.compile(r'/api/v1(/api/v1)+')

REDIRECT_LOOP_WINDOW_MS = 5000


class ApiClient:
    """
    Thin wrapper over ``requests.Session`` for the complaint API.

    Every request gets the stored bearer token, a duplicate ``/api/v1``
    path fix and up to ``max_retries`` retries with exponential backoff
    (1s, 2s, ...) on network errors, timeouts and 5xx responses. A 401
    outside the login page drops the stored credentials and sends the
    user back to the login page. Errors are always re-raised to the caller.

    ``location`` is the path of the page currently shown by the UI hosting
    the client; ``on_navigate`` is called with the new path whenever the
    client redirects.
    """

    def __init__(self, base_url=None, local_storage=None, session_storage=None,
                 notifier=None, on_navigate=None, location=LOGIN_PATH,
                 max_retries=2, timeout=60, redirect_delay=2.0,
                 session=None, sleep=time.sleep, clock=time.time):
        base_url = base_url or os.environ.get('COMPLAINT_API_URL') or DEFAULT_BASE_URL
        self.base_url = base_url.rstrip('/')
        self.api_url = f"{self.base_url}{API_PREFIX}"
        logger.info(f"API configured with base URL: {self.api_url}")

        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})

        self.local_storage = local_storage if local_storage is not None else Storage()
        self.session_storage = session_storage if session_storage is not None else Storage()
        self.notifier = notifier or Notifier()
        self.on_navigate = on_navigate
        self.location = location

        self.max_retries = max_retries
        self.timeout = timeout
        self.redirect_delay = redirect_delay
        self.sleep = sleep
        self.clock = clock

        # Retry attempts per "method-url" key
        self.retry_counts = {}
        self.redirect_timer = None

        self.check_auth_redirect()

    # Navigation
    def navigate(self, path):
        logger.info(f"[API] Navigating to {path}")
        self.location = path
        if self.on_navigate is not None:
            self.on_navigate(path)

    def check_auth_redirect(self):
        """
        Detect a redirect loop caused by repeated 401s right after startup.

        Returns True when a loop was detected and the stored state was wiped.
        """
        timestamp = self.session_storage.get_item(AUTH_REDIRECT_KEY)
        if not timestamp:
            return False

        try:
            redirect_time = int(timestamp)
        except ValueError:
            redirect_time = 0

        if self._now_ms() - redirect_time < REDIRECT_LOOP_WINDOW_MS:
            logger.info('[AUTH FAILSAFE] Detected possible auth redirect loop')
            self.local_storage.clear()
            self.session_storage.clear()
            if self.location != LOGIN_PATH:
                self.navigate(LOGIN_PATH)
            return True

        self.session_storage.remove_item(AUTH_REDIRECT_KEY)
        return False

    # Requests
    def build_url(self, url):
        if url.startswith(('http://', 'https://')):
            full_url = url
        else:
            full_url = f"{self.api_url}/{url.lstrip('/')}"

        if DUPLICATE_PATH_RE.search(full_url):
            logger.warning('[API Warning] Detected duplicate /api/v1/ in URL path. Fixing URL.')
            full_url = DUPLICATE_PATH_RE.sub(API_PREFIX, full_url)
        return full_url

    def request(self, method, url, **kwargs):
        method = method.lower()
        request_key = f"{method}-{url}"

        while True:
            try:
                response = self._send(method, url, dict(kwargs))
                response.raise_for_status()
            except requests.RequestException as error:
                if self._should_retry(request_key, error):
                    continue
                self._handle_error(url, error)
                raise

            self.retry_counts.pop(request_key, None)
            if method != 'get':
                logger.info(f"[API Success] {response.status_code} {url}")
            return response

    def get(self, url, **kwargs):
        return self.request('get', url, **kwargs)

    def post(self, url, **kwargs):
        return self.request('post', url, **kwargs)

    def put(self, url, **kwargs):
        return self.request('put', url, **kwargs)

    def patch(self, url, **kwargs):
        return self.request('patch', url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request('delete', url, **kwargs)

    def _send(self, method, url, kwargs):
        headers = dict(kwargs.pop('headers', None) or {})
        token = self.local_storage.get_item(AUTH_TOKEN_KEY)
        if token:
            headers['Authorization'] = f'Bearer {token}'

        logger.info(f"[API] {method.upper()} {url}")
        kwargs.setdefault('timeout', self.timeout)
        return self.session.request(method.upper(), self.build_url(url), headers=headers, **kwargs)

    def _should_retry(self, request_key, error):
        retry_count = self.retry_counts.get(request_key, 0)
        response = getattr(error, 'response', None)
        retryable = (response is None or response.status_code >= 500
                     or isinstance(error, requests.Timeout))

        if retry_count < self.max_retries and retryable:
            self.retry_counts[request_key] = retry_count + 1
            delay = 2 ** retry_count
            logger.info(f"[API] Retrying request ({retry_count + 1}/{self.max_retries}) after {delay * 1000}ms delay...")
            self.sleep(delay)
            return True

        self.retry_counts.pop(request_key, None)
        return False

    def _handle_error(self, url, error):
        response = getattr(error, 'response', None)

        if response is None:
            logger.error(f"[API Network Error] {url}: {error}")
            if isinstance(error, (requests.Timeout, requests.ConnectionError)):
                logger.info('[API] Possible cold start detected. The backend might be starting up.')
                if isinstance(error, requests.Timeout):
                    self.notifier.show(COLD_START_NOTIFICATION,
                                       'Server is starting up. This may take up to 60 seconds...',
                                       duration=10.0)
            return

        status = response.status_code
        logger.error(f"[API Error] {status} {url}: {error}")

        if status == 401:
            self._handle_unauthorized()
        elif status == 404 and '/login' in url:
            logger.error(f"[API URL Error] Login endpoint not found. Check if API base URL is correct: {self.api_url}")

    def _handle_unauthorized(self):
        # Already on the login page; nothing to invalidate
        if self.location == LOGIN_PATH:
            return

        logger.info('[API] Authentication failed - redirecting to login')
        self.local_storage.remove_item(AUTH_TOKEN_KEY)
        self.local_storage.remove_item(REMEMBERED_USER_KEY)

        shown = self.notifier.show(AUTH_REDIRECT_NOTIFICATION,
                                   'Authentication error. Redirecting to login...',
                                   duration=self.redirect_delay)
        if not shown:
            self.navigate(LOGIN_PATH)
            return

        self.session_storage.set_item(AUTH_REDIRECT_KEY, str(self._now_ms()))
        if self.redirect_delay > 0:
            # navigate() runs on the timer thread; location stays stale until it fires
            self.cancel_redirect()
            self.redirect_timer = threading.Timer(self.redirect_delay, self.navigate, args=(LOGIN_PATH,))
            self.redirect_timer.daemon = True
            self.redirect_timer.start()
        else:
            self.navigate(LOGIN_PATH)

    def cancel_redirect(self):
        """Stop a pending delayed redirect to the login page, if any."""
        if self.redirect_timer is not None:
            self.redirect_timer.cancel()
            self.redirect_timer = None

    def _now_ms(self):
        return int(self.clock() * 1000)
