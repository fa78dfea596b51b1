import os
from collections import deque
from typing import Deque

from quick_add.models import TaskRecord

RECENT_TASKS_LIMIT = int(os.getenv("RECENT_TASKS_LIMIT", "100"))

# In-memory storage for recently added tasks; the host app owns persistence
recent_tasks: Deque[TaskRecord] = deque(maxlen=RECENT_TASKS_LIMIT)
