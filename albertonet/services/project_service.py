from typing import List, Optional

from albertonet.schemas.project import LocalizedProject, Project
from albertonet.services.localization import Localization

PROJECTS = [
    Project(
        inProgress=False,
        repoUrl="https://github.com/tizor98/genpass",
        locale={
            "en": {
                "title": "genpass",
                "description": "CLI tool to generate and manage passwords locally",
                "detail": (
                    "It manages and creates passwords locally. You can optionally set "
                    "up users to store those.\n\nIf you use users, all information is "
                    "stored in a local sqlite3 database."
                ),
            },
            "es": {
                "title": "genpass",
                "description": "Aplicación CLI para generar y gestionar contraseñas localmente",
                "detail": (
                    "Gestiona y crea contraseñas localmente. Opcionalmente, puede "
                    "configurar usuarios para almacenarlas.\n\nSi utiliza usuarios, toda "
                    "la información se almacena en una base de datos local sqlite3."
                ),
            },
        },
    ),
    Project(
        inProgress=True,
        repoUrl="https://github.com/tizor98/albertonet",
        deployUrl="https://www.albertonet.com/",
        locale={
            "en": {
                "title": "albertonet.com",
                "description": "Blog, learning, and personal website",
                "detail": (
                    "Albertonet is where I present my software development portfolio "
                    "and write about programming, technology and being a software "
                    "developer."
                ),
            },
            "es": {
                "title": "albertonet.com",
                "description": "Blog, aprendizaje y sitio web personal",
                "detail": (
                    "Albertonet es donde presento mi portafolio de software y escribo "
                    "sobre programación, tecnología y ser un desarrollador de software."
                ),
            },
        },
    ),
    Project(
        inProgress=True,
        locale={
            "en": {
                "title": "mypods",
                "description": "Mobile app to use any apple airpods with any android smartphone",
                "detail": (
                    "mypods is a mobile app that allows you to seamlessly connect any "
                    "Apple AirPods with any Android smartphone."
                ),
            },
        },
    ),
]


class ProjectService:
    def __init__(self, localization: Localization, projects: Optional[List[Project]] = None):
        self.localization = localization
        self.projects = PROJECTS if projects is None else projects

    def get_top_projects(self, locale: Optional[str] = None) -> List[LocalizedProject]:
        locale = self.localization.normalize_locale(locale)
        return [self._localize(project, locale) for project in self.projects]

    def _localize(self, project: Project, locale: str) -> LocalizedProject:
        detail = project.locale.get(locale) or project.locale.get(
            self.localization.default_locale
        )
        if detail is None:
            # Last resort: whatever translation the project has
            detail = next(iter(project.locale.values()))
        return LocalizedProject(
            **detail.model_dump(),
            **project.model_dump(exclude={"locale"}),
        )
