import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class ProjectDetail(BaseModel):
    title: str
    description: str
    detail: str


class Project(BaseModel):
    inProgress: bool
    repoUrl: Optional[str] = None
    deployUrl: Optional[str] = None
    lastDeployDate: Optional[datetime.date] = None
    image: Optional[str] = None
    locale: Dict[str, ProjectDetail]


class LocalizedProject(ProjectDetail):
    inProgress: bool
    repoUrl: Optional[str] = None
    deployUrl: Optional[str] = None
    lastDeployDate: Optional[datetime.date] = None
    image: Optional[str] = None
