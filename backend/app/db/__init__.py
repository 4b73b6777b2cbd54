"""Database Declarations — SQLAlchemy Base shared by models, schema creation and migrations."""
