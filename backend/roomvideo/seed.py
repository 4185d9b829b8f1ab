"""Default data for an empty database.

Run ``python -m roomvideo.seed`` to seed the configured database, or
``python -m roomvideo.seed create-user USERNAME EMAIL PASSWORD [ROLE]`` to add
an account.
"""
from sqlalchemy.orm import Session
import logging
import sys

from roomvideo.models.enums import Role
from roomvideo.models.room import Room
from roomvideo.models.user import User
from roomvideo.services.users import create_user

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_EMAIL = "admin@raroomreport.com"
DEFAULT_ADMIN_PASSWORD = "password"
SAMPLE_ROOMS = ["101", "102", "201", "202", "301"]


def seed_defaults(db: Session) -> None:
    """Create the default supervisor and sample rooms if none exist."""
    if db.query(User).count() == 0:
        create_user(
            db,
            username=DEFAULT_ADMIN_USERNAME,
            email=DEFAULT_ADMIN_EMAIL,
            password=DEFAULT_ADMIN_PASSWORD,
            role=Role.SUPERVISOR,
        )
        logger.info(f"Default admin user created (username: {DEFAULT_ADMIN_USERNAME})")

    if db.query(Room).count() == 0:
        for room_number in SAMPLE_ROOMS:
            db.add(Room(room_number=room_number, is_active=True))
        db.commit()
        logger.info("Sample rooms created")


def main(argv=None) -> int:
    from roomvideo.config import get_settings
    from roomvideo.database import Base, create_db_engine, create_session_factory

    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    engine = create_db_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()

    try:
        if argv and argv[0] == "create-user":
            if len(argv) not in (4, 5):
                print("usage: python -m roomvideo.seed create-user USERNAME EMAIL PASSWORD [ROLE]")
                return 2
            role = Role(argv[4]) if len(argv) == 5 else Role.USER
            user = create_user(db, username=argv[1], email=argv[2], password=argv[3], role=role)
            print(f"User '{user.username}' created with role {user.role.value}")
        else:
            seed_defaults(db)
    finally:
        db.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
