# storage.py
# Key/value stores standing in for the browser's localStorage and sessionStorage
import json
import logging
import os

logger = logging.getLogger('complaint_client')


class Storage:
    """
    String key/value store. When ``path`` is given the values are persisted
    to that JSON file after every change.
    """

    def __init__(self, path=None):
        self.path = path
        self._items = {}
        if path and os.path.exists(path):
            try:
                with open(path, encoding='utf-8') as fp:
                    self._items = {str(k): str(v) for k, v in json.load(fp).items()}
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read storage file {path}: {e}")

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key):
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self):
        self._items.clear()
        self._flush()

    def __contains__(self, key):
        return key in self._items

    def __len__(self):
        return len(self._items)

    def _flush(self):
        if not self.path:
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as fp:
            json.dump(self._items, fp)
