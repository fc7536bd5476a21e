"""Example projects used when no stored collection is available."""

from project_dashboard.models import Project, ProjectStage, ProjectStatus, ProjectType

_SEED_RECORDS: list[dict] = [
    {
        "id": "1",
        "name": "Project Dashboard",
        "summary": "Track all side projects in one place",
        "description": "Track progress across side projects",
        "type": ProjectType.PERSONAL,
        "usefulness": 5,
        "status": ProjectStatus.IN_PROGRESS,
        "stage": ProjectStage.BUILD,
        "is_monetized": False,
        "github_url": "https://github.com/username/project-dashboard",
        "last_updated": "2023-05-10",
        "progress": 75,
        "activity_log": [
            "2023-05-10: Added filtering functionality",
            "2023-05-08: Created initial project structure",
            "2023-05-05: Brainstormed UI design",
        ],
        "tags": ["React", "Personal"],
    },
    {
        "id": "2",
        "name": "Recipe Manager",
        "summary": "Simple recipe organizer app",
        "description": "App to store and organize recipes",
        "type": ProjectType.SELL,
        "usefulness": 4,
        "status": ProjectStatus.LIVE,
        "stage": ProjectStage.MARKET,
        "is_monetized": True,
        "github_url": "https://github.com/username/recipe-manager",
        "website_url": "https://recipe-app.example.com",
        "last_updated": "2023-05-01",
        "progress": 100,
        "activity_log": [
            "2023-05-01: Deployed to production",
            "2023-04-28: Completed user testing",
            "2023-04-20: Implemented recipe search",
        ],
        "tags": ["React", "Commercial", "Food"],
    },
    {
        "id": "3",
        "name": "Budget Tracker",
        "summary": "Keep track of personal finances",
        "description": "Personal finance tool",
        "type": ProjectType.PERSONAL,
        "usefulness": 3,
        "status": ProjectStatus.ABANDONED,
        "stage": ProjectStage.LAUNCH,
        "is_monetized": False,
        "github_url": "https://github.com/username/budget-tracker",
        "last_updated": "2023-03-15",
        "progress": 30,
        "activity_log": [
            "2023-03-15: Decided to pause development",
            "2023-03-10: Added expense categories",
            "2023-03-01: Started project setup",
        ],
        "tags": ["Finance"],
    },
    {
        "id": "4",
        "name": "AI Writing Assistant",
        "summary": "AI-powered content creation",
        "description": "Tool to help with content creation",
        "type": ProjectType.SELL,
        "usefulness": 5,
        "status": ProjectStatus.IDEA,
        "stage": ProjectStage.IDEA,
        "is_monetized": False,
        "next_action": "Research NLP libraries",
        "progress": 5,
        "activity_log": [
            "2023-04-15: Initial concept documented",
            "2023-04-10: Market research completed",
        ],
        "tags": ["AI", "Writing", "Commercial"],
    },
    {
        "id": "5",
        "name": "Fitness Tracker",
        "summary": "Track workouts and progress",
        "description": "App to track workouts and progress",
        "type": ProjectType.PERSONAL,
        "usefulness": 2,
        "status": ProjectStatus.IN_PROGRESS,
        "stage": ProjectStage.BUILD,
        "is_monetized": False,
        "github_url": "https://github.com/username/fitness-tracker",
        "website_url": "https://fitness-app.example.com",
        "next_action": "Implement workout timer",
        "last_updated": "2023-04-20",
        "progress": 45,
        "activity_log": [
            "2023-04-20: Added workout logging feature",
            "2023-04-15: Created UI mockups",
            "2023-04-10: Project setup",
        ],
        "tags": ["Health", "Personal"],
    },
]


def seed_projects() -> list[Project]:
    return [Project.model_validate(record) for record in _SEED_RECORDS]
