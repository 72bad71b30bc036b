# Digital Mechanic: Database Models
# Import all models here for SQLAlchemy discovery

from app.models.user import User     # noqa
from app.models.car import Car       # noqa
