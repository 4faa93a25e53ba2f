def required_messages(text, **extra):
    """Same message for every way a required field can be missing or malformed."""
    messages = {"required": text, "blank": text, "null": text, "invalid": text}
    messages.update(extra)
    return messages
