"""BasicWebApp: API and web tiers with tagged health checks and startup migrations."""
