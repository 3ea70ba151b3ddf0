"""
Seed script to populate the default roles and an administrator account.

Run this script after database initialization to create:
- The built-in roles (existing roles with the same id are left alone)
- An admin user with DEFAULT_ADMIN_EMAIL, if no user has that email

Usage:
    uv run python -m scripts.seed_roles
"""
import asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import config
from app.core.database.engine import get_db, init_db
from app.features.permissions.catalog import DEFAULT_ROLES
from app.features.roles.models import Role
from app.features.roles.schemas import normalize_permissions
from app.features.users.auth import create_access_token
from app.features.users.models import User
from app.utils import get_logger


log = get_logger(__name__)


async def seed_roles(db: AsyncSession) -> int:
    """
    Create missing default roles.

    Returns:
        Number of roles created
    """
    log.info("Creating default roles...")
    created = 0

    for role_config in DEFAULT_ROLES:
        if await db.get(Role, role_config["id"]) is not None:
            log.debug(f"Role '{role_config['id']}' already exists, skipping")
            continue

        db.add(Role(
            id=role_config["id"],
            name=role_config["name"],
            permissions=normalize_permissions(role_config["permissions"]),
        ))
        created += 1
        log.info(f"Created role '{role_config['id']}' with {len(role_config['permissions'])} permissions")

    await db.flush()
    return created


async def seed_admin(db: AsyncSession) -> User:
    """Create the administrator account if it does not exist yet."""
    result = await db.execute(select(User).where(User.email == config.DEFAULT_ADMIN_EMAIL))
    user = result.scalar_one_or_none()

    if user is not None:
        log.debug(f"User '{user.email}' already exists, skipping")
        return user

    user = User(email=config.DEFAULT_ADMIN_EMAIL, name=config.DEFAULT_ADMIN_NAME, role_id=config.ADMIN_ROLE_ID)
    db.add(user)
    await db.flush()
    log.info(f"Created admin user {user.email}")
    return user


async def main():
    """Main function to seed roles and the admin user."""
    log.info("Starting role seeding...")

    log.info("Initializing database tables...")
    await init_db()

    async for db in get_db():
        try:
            created = await seed_roles(db)
            admin = await seed_admin(db)
            await db.commit()

            log.info(f"Role seeding completed successfully, {created} roles created")
            log.info(f"Admin token for {admin.email}: {create_access_token(admin.id)}")

        except Exception as e:
            log.error(f"Error seeding roles: {e}", exc_info=True)
            await db.rollback()
            raise

        break  # Only use first session


if __name__ == "__main__":
    asyncio.run(main())
