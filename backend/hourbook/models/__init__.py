from hourbook.models.setting import Setting  # noqa: F401
from hourbook.models.weekly_log import WeeklyLog  # noqa: F401
