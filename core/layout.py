from enum import Enum


class Layout(Enum):
    TASK_LIST = "task_list"
    TASK_DETAILS = "task_details"
