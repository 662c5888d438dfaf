import importlib

from pydantic import BaseModel

from credkit.errors import InvalidConfigError


class KDF:
    """Key derivation function capability.

    A backend turns a cost config into a salt, and a password plus salt into a
    self-describing encoded hash (algorithm, cost, salt and digest in one
    string). The same password and salt always give a byte-identical encoding.
    """

    _registry = {}
    name: str = ""
    config_class: type[BaseModel] = BaseModel

    @classmethod
    def register(cls, name, kclass):
        kclass.name = name
        cls._registry[name] = kclass

    @classmethod
    def get_instance(cls, name: str) -> "KDF":
        if name not in cls._registry:
            module_name = f"credkit.kdf.kdf_{name}"
            try:
                importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                raise InvalidConfigError(f"Unknown KDF backend: {name}") from e
        return cls._registry[name]()

    def default_config(self) -> BaseModel:
        raise NotImplementedError

    def check_config(self, config: BaseModel | None) -> BaseModel:
        if config is None:
            return self.default_config()
        if not isinstance(config, self.config_class):
            raise InvalidConfigError(
                f"{self.name} expects {self.config_class.__name__}, "
                f"got {type(config).__name__}"
            )
        return config

    def gen_salt(self, config: BaseModel | None = None) -> str:
        return self._gen_salt(self.check_config(config))

    def hash(self, password: str, salt: str) -> str:
        raise NotImplementedError

    def parse_salt(self, encoded: str) -> str:
        """Return the salt part of an encoded hash, suitable for `hash`.

        Raises MalformedHashError if the encoding is not one of ours.
        """
        raise NotImplementedError

    def _gen_salt(self, config: BaseModel) -> str:
        raise NotImplementedError
