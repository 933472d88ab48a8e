from progress.bar import Bar

class SurveyProgress(Bar) :
    suffix = "%(phase)s | Level: %(current_level)d | Failures: %(failures)d | %(index)d/%(max)d"

    def __init__(self, *args, **kwargs) :
        self.current_level : int = 0
        self.failures : int = 0
        self.phase = "Generating"
        super().__init__(*args, **kwargs)

    def record(self, level: int, ok: bool) :
        self.current_level = level
        if not ok :
            self.failures += 1
        self.next()

    def summarize(self) :
        self.phase = "Done"
        self.update()
