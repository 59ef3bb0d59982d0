"""Database configuration and initialization."""
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker, declarative_base

# Create SQLAlchemy base
Base = declarative_base()

# Global session and engine
engine = None
db_session = None


def _engine_options(app):
    """Pool settings; SQLite (tests) keeps its default pool."""
    options = {
        'echo': app.config.get('SQLALCHEMY_ECHO', False),
        'pool_pre_ping': True,  # Enable connection health checks
    }
    if not app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
        options.update(pool_size=10, max_overflow=20)
    else:
        options['connect_args'] = {'check_same_thread': False}
    return options


def init_db(app):
    """Initialize database connection."""
    global engine, db_session

    database_uri = app.config['SQLALCHEMY_DATABASE_URI']
    engine = create_engine(database_uri, **_engine_options(app))

    db_session = scoped_session(
        sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )

    if app.config.get('DB_CREATE_ALL'):
        create_all()

    # Register teardown
    @app.teardown_appcontext
    def shutdown_session(exception=None):
        """Close database session and rollback on error."""
        if exception:
            db_session.rollback()
        db_session.remove()


def create_all():
    """Create every table registered on Base."""
    # Models must be imported so their tables are registered
    import lettings.models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_session():
    """Get database session."""
    return db_session


def new_session():
    """Open an independent session (outside the request-scoped registry)."""
    return db_session.session_factory()
