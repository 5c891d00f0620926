"""User service for database operations."""

from typing import List, Optional

from db.manager import write_transaction
from errors import StorageError, ValidationError
from models.user import User


class UserService:
    """Service for managing the users that own budget categories."""

    def __init__(self, db_manager):
        """Initialize the user service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[User]:
        """Get all users, ordered by id."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT id, username FROM users ORDER BY id")
            return [User(id=row[0], username=row[1]) for row in cursor.fetchall()]

    def find(self, user_id: int) -> Optional[User]:
        """Get a single user by ID.

        Args:
            user_id: The user ID to find.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                "SELECT id, username FROM users WHERE id = ?", (user_id,)
            ).fetchone()

            if row:
                return User(id=row[0], username=row[1])
            return None

    def create(self, username: str) -> User:
        """Create a new user.

        Args:
            username: Unique user name.

        Returns:
            The created User object with id populated.

        Raises:
            ValidationError: If the username is blank.
            StorageError: If the username is already taken.
        """
        if not username or not username.strip():
            raise ValidationError("Username cannot be empty")

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO users (username) VALUES (?)", (username.strip(),)
            )
            return User(id=cursor.lastrowid, username=username.strip())

    def ensure_default(self, user_id: int, username: str = "default_user") -> User:
        """Make sure a user with this ID exists, creating it if needed."""
        with self.db_manager.connect() as conn, write_transaction(conn):
            conn.execute(
                "INSERT OR IGNORE INTO users (id, username) VALUES (?, ?)",
                (user_id, username),
            )
            row = conn.execute(
                "SELECT id, username FROM users WHERE id = ?", (user_id,)
            ).fetchone()

        if row is None:
            raise StorageError(
                f"Could not create user {user_id}: username '{username}' is already taken"
            )
        return User(id=row[0], username=row[1])
