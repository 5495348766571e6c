import codecs
import configparser

DEFAULT_CONFIG = {
    "encoding": "utf-8",
    "errors": "replace",
}

def load_config(filename, section="DEFAULT"):
    """Read decoder settings from the INI file *filename*.

    Missing files, sections and keys fall back to ``DEFAULT_CONFIG``.
    The result can be passed straight on as ``decode(line, **config)``.
    """
    config = configparser.ConfigParser()
    config.read(filename)
    if not config.has_section(section):
        section = configparser.DEFAULTSECT
    config = config[section]
    encoding = config.get("encoding", DEFAULT_CONFIG["encoding"])
    errors = config.get("errors", DEFAULT_CONFIG["errors"])
    # Both raise LookupError for names the codec registry does not know.
    codecs.lookup(encoding)
    codecs.lookup_error(errors)
    return {
        "encoding": encoding,
        "errors": errors,
    }
