"""Use cases composing repositories with the roster and fight-record builders."""
