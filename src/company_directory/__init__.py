"""Company directory backend: companies, slugs and hiring-request moderation."""
