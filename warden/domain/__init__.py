"""Domain layer - Pure business logic.

Structure:
- entities/: Domain entities (User)
- value_objects/: Validated value types (Email, Password, LoginAttemptId, TwoFACode, BearerToken)
- protocols/: Ports (store contracts, hashing, tokens, notifier, logging)
- errors/: Domain error variants (store errors, token errors, password policy)

The domain layer defines WHAT the authority does, not HOW it's stored or transported.
"""
