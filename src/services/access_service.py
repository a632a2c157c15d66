from src.config.roles import ACCESS_LEVELS


class AccessService:
    def __init__(self, store, config):
        self.store = store
        self.config = config
        # Checked top-down, the first matching predicate decides the tier
        self.policy = (
            (self._is_manager, ACCESS_LEVELS["MANAGER"]),
            (self._is_admin, ACCESS_LEVELS["ADMIN"]),
            (self._is_pm, ACCESS_LEVELS["PM"]),
            (lambda user, channel_id: True, ACCESS_LEVELS["DEFAULT"]),
        )
        self.denials = {
            ACCESS_LEVELS["ADMIN"]: config.translation.access_at_least_admin,
            ACCESS_LEVELS["PM"]: config.translation.access_at_least_pm,
        }

    def resolve_access_level(self, user_id, channel_id):
        """Get a user's tier in a channel. Raises NotFoundError for an unknown user."""
        user = self.store.select_user(user_id)
        for predicate, level in self.policy:
            if predicate(user, channel_id):
                return level

    def check_access(self, access_level, max_level):
        """Return the denial message if access_level is less privileged than max_level, else None"""
        if access_level > max_level:
            return self.denials[max_level]
        return None

    def _is_manager(self, user, channel_id):
        return bool(self.config.manager_id) and user.user_id == self.config.manager_id

    def _is_admin(self, user, channel_id):
        return user.is_admin()

    def _is_pm(self, user, channel_id):
        return self.store.user_is_pm_for_project(user.user_id, channel_id)
