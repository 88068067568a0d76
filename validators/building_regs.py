import math


class PartKValidator:
    """Advisory check of a flight against UK Building Regulations Part K (Stairs).

    Never blocks generation; the notes are reported alongside the mesh.
    """

    @staticmethod
    def check_flight(rise: float, going: float) -> list[str]:
        """
        Check one flight's proportions.

        Args:
            rise: Individual riser height (mm), as built
            going: Individual going depth (mm)
        """
        notes = []

        # Private dwelling limits
        # Rise: 150mm to 220mm
        # Going: 220mm to 300mm
        # Pitch: Max 42 degrees
        # 2R + G: 550mm to 700mm
        pitch = math.degrees(math.atan2(rise, going))
        trg = 2 * rise + going

        if not (150 <= rise <= 220):
            notes.append(f"Riser height {rise:.1f}mm is outside compliant range [150, 220]")

        if not (220 <= going <= 300):
            notes.append(f"Stair going {going:.1f}mm is outside compliant range [220, 300]")

        if pitch > 42.1:  # rounding margin
            notes.append(f"Pitch {pitch:.1f}° exceeds maximum 42°")

        if not (550 <= trg <= 700):
            notes.append(f"2R + G calculation ({trg:.1f}) is outside compliant range [550, 700]")

        return notes

    @classmethod
    def check_single_stair(cls, config) -> list[str]:
        from staircase_single import actual_step_height
        rise = actual_step_height(config["overall_height"], config["step_height"])
        return cls.check_flight(rise, config["step_length"])

    @classmethod
    def check_stairwell(cls, config) -> list[str]:
        notes = cls.check_flight(config["step_height"], config["step_length"])
        if config["platform_depth"] < config["stair_width"]:
            notes.append(
                f"Landing depth {config['platform_depth']:.0f}mm is shorter than the "
                f"stair width {config['stair_width']:.0f}mm")
        if config["platform_width"] < config["stair_width"]:
            notes.append(
                f"Landing width {config['platform_width']:.0f}mm is narrower than the "
                f"stair width {config['stair_width']:.0f}mm")
        return notes
