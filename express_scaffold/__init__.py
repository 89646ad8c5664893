"""CLI to scaffold an Express, TypeScript, MySQL, Sequelize project."""

__version__ = "1.0.0"
