from cashbook.infrastructure.auth.github_oauth import GitHubOAuthClient

__all__ = ["GitHubOAuthClient"]
