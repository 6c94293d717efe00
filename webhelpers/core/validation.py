import re


EMAIL_PATTERN = re.compile(r'[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+')

# Mailbox-shaped: a local part, "@", then one to eight dot-terminated host
# labels and a 2-63 letter top-level label.
URL_PATTERN = re.compile(
    r'(?=[A-Z0-9][A-Z0-9@._%+-]{5,253}$)'
    r'[A-Z0-9._%+-]{1,64}@'
    r'(?:(?=[A-Z0-9-]{1,63}\.)[A-Z0-9]+(?:-[A-Z0-9]+)*\.){1,8}'
    r'[A-Z]{2,63}',
    re.IGNORECASE | re.ASCII,
)


def is_valid_email(email: str) -> bool:
    """Loose ``local@domain`` check, not RFC 5322."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_url(url: str) -> bool:
    # Matches addresses like "user@host.example", not scheme://host URLs.
    return URL_PATTERN.fullmatch(url) is not None
