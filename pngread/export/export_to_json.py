import json
import base64
import dataclasses


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, (bytes, bytearray)):
            return base64.b64encode(obj).decode('utf-8')
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        return super().default(obj)


def export_to_json(data, filename):
    with open(filename, 'w') as file:
        json.dump(data, file, cls=CustomJSONEncoder, indent=4)
