from .audit import Audit
from .base import Resource
from .content import Content
from .contentbody import ContentBody
from .group import Group
from .longtask import LongTask
from .relation import Relation
from .search import Search
from .settings import Settings
from .space import Space
from .template import Template
from .user import User

RESOURCES: dict[str, type[Resource]] = {
    "audit": Audit,
    "content": Content,
    "contentbody": ContentBody,
    "group": Group,
    "longtask": LongTask,
    "relation": Relation,
    "search": Search,
    "settings": Settings,
    "space": Space,
    "template": Template,
    "user": User,
}

__all__ = [
    "RESOURCES",
    "Resource",
    "Audit",
    "Content",
    "ContentBody",
    "Group",
    "LongTask",
    "Relation",
    "Search",
    "Settings",
    "Space",
    "Template",
    "User",
]
