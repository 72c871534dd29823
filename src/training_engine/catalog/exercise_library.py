"""Built-in exercise library grouped by movement pattern.

Equipment lists are alternatives: any one listed item is enough to perform
the exercise. The tag "none" needs no equipment at all.
"""

from __future__ import annotations

from training_engine.models.enums import MovementPattern as P
from training_engine.models.exercise import Exercise


def _ex(
    exercise_id: str,
    name: str,
    pattern: P,
    equipment: tuple[str, ...],
    muscles: tuple[str, ...],
    pr_key: str | None = None,
    is_cardio: bool = False,
    is_mobility: bool = False,
) -> Exercise:
    return Exercise(
        exercise_id=exercise_id,
        name=name,
        pattern=pattern,
        equipment=frozenset(equipment),
        muscles=frozenset(muscles),
        pr_key=pr_key,
        is_cardio=is_cardio,
        is_mobility=is_mobility,
    )


# Insertion order is the tie-breaker for substitution ranking.
EXERCISE_LIBRARY: tuple[Exercise, ...] = (
    _ex("trapBarDeadlift", "Trap Bar Deadlift", P.HIP_HINGE, ("trapBar",), ("glutes", "hamstrings", "back", "quads"), pr_key="trapBarDeadlift"),
    _ex("conventionalDeadlift", "Conventional Deadlift", P.HIP_HINGE, ("barbell",), ("glutes", "hamstrings", "back")),
    _ex("sumoDeadlift", "Sumo Deadlift", P.HIP_HINGE, ("barbell",), ("glutes", "hamstrings", "quads", "adductors")),
    _ex("romanianDeadlift", "Romanian Deadlift", P.HIP_HINGE, ("barbell", "dumbbell"), ("hamstrings", "glutes")),
    _ex("stiffLegDeadlift", "Stiff Leg Deadlift", P.HIP_HINGE, ("barbell", "dumbbell"), ("hamstrings", "glutes", "back")),
    _ex("kettlebellSwing", "Kettlebell Swing", P.HIP_HINGE, ("kettlebell",), ("glutes", "hamstrings", "core")),
    _ex("hipThrust", "Hip Thrust", P.HIP_HINGE, ("barbell", "bench"), ("glutes",)),
    _ex("machineHipThrust", "Machine Hip Thrust", P.HIP_HINGE, ("machine",), ("glutes",)),
    _ex("goodMorning", "Good Morning", P.HIP_HINGE, ("barbell",), ("hamstrings", "back")),
    _ex("cableKickback", "Cable Kickback", P.HIP_HINGE, ("cable",), ("glutes",)),
    _ex("gluteHamRaise", "Glute Ham Raise", P.HIP_HINGE, ("machine",), ("hamstrings", "glutes")),
    _ex("reverseHyper", "Reverse Hyperextension", P.HIP_HINGE, ("machine",), ("glutes", "hamstrings", "back")),
    _ex("backExtension", "Back Extension", P.HIP_HINGE, ("machine", "bodyweight"), ("back", "glutes", "hamstrings")),
    _ex("pullThrough", "Cable Pull-Through", P.HIP_HINGE, ("cable",), ("glutes", "hamstrings")),
    _ex("backSquat", "Back Squat", P.SQUAT, ("barbell",), ("quads", "glutes"), pr_key="backSquat"),
    _ex("frontSquat", "Front Squat", P.SQUAT, ("barbell",), ("quads", "core"), pr_key="frontSquat"),
    _ex("safetyBarSquat", "Safety Bar Squat", P.SQUAT, ("barbell",), ("quads", "glutes", "core")),
    _ex("gobletSquat", "Goblet Squat", P.SQUAT, ("kettlebell", "dumbbell"), ("quads", "glutes")),
    _ex("zercher_squat", "Zercher Squat", P.SQUAT, ("barbell",), ("quads", "glutes", "core")),
    _ex("legPress", "Leg Press", P.SQUAT, ("machine",), ("quads", "glutes")),
    _ex("legPressWide", "Leg Press (Wide Stance)", P.SQUAT, ("machine",), ("quads", "glutes", "adductors")),
    _ex("hackSquat", "Hack Squat", P.SQUAT, ("machine",), ("quads",)),
    _ex("pendulumSquat", "Pendulum Squat", P.SQUAT, ("machine",), ("quads", "glutes")),
    _ex("vSquat", "V-Squat", P.SQUAT, ("machine",), ("quads", "glutes")),
    _ex("smithSquat", "Smith Machine Squat", P.SQUAT, ("machine",), ("quads", "glutes")),
    _ex("beltSquat", "Belt Squat", P.SQUAT, ("machine",), ("quads", "glutes")),
    _ex("boxStepUp", "Box Step-Up", P.LUNGE, ("box", "dumbbell"), ("quads", "glutes"), pr_key="boxStepUp"),
    _ex("walkingLunge", "Walking Lunge", P.LUNGE, ("bodyweight", "dumbbell"), ("quads", "glutes")),
    _ex("reverseLunge", "Reverse Lunge", P.LUNGE, ("bodyweight", "dumbbell", "barbell"), ("quads", "glutes")),
    _ex("lateralLunge", "Lateral Lunge", P.LUNGE, ("bodyweight", "dumbbell"), ("quads", "glutes", "adductors")),
    _ex("curtsy_lunge", "Curtsy Lunge", P.LUNGE, ("bodyweight", "dumbbell"), ("glutes", "quads")),
    _ex("bulgarianSplitSquat", "Bulgarian Split Squat", P.LUNGE, ("bench", "dumbbell"), ("quads", "glutes")),
    _ex("singleLegRDL", "Single Leg RDL", P.LUNGE, ("dumbbell", "kettlebell"), ("hamstrings", "glutes")),
    _ex("singleLegPress", "Single Leg Press", P.LUNGE, ("machine",), ("quads", "glutes")),
    _ex("singleLegLegCurl", "Single Leg Curl", P.LUNGE, ("machine",), ("hamstrings",)),
    _ex("pistolSquat", "Pistol Squat", P.LUNGE, ("bodyweight",), ("quads", "glutes")),
    _ex("splitSquat", "Split Squat", P.LUNGE, ("bodyweight", "dumbbell"), ("quads", "glutes")),
    _ex("benchPress", "Bench Press", P.HORIZONTAL_PUSH, ("barbell", "bench"), ("chest", "triceps", "shoulders"), pr_key="benchPress"),
    _ex("inclineBenchPress", "Incline Bench Press", P.HORIZONTAL_PUSH, ("barbell", "bench"), ("chest", "shoulders")),
    _ex("declineBenchPress", "Decline Bench Press", P.HORIZONTAL_PUSH, ("barbell", "bench"), ("chest", "triceps")),
    _ex("closeGripBench", "Close Grip Bench Press", P.HORIZONTAL_PUSH, ("barbell", "bench"), ("triceps", "chest")),
    _ex("dbBenchPress", "DB Bench Press", P.HORIZONTAL_PUSH, ("dumbbell", "bench"), ("chest", "triceps")),
    _ex("dbInclineBenchPress", "DB Incline Bench Press", P.HORIZONTAL_PUSH, ("dumbbell", "bench"), ("chest", "shoulders")),
    _ex("pushUp", "Push-Up", P.HORIZONTAL_PUSH, ("bodyweight",), ("chest", "triceps", "core")),
    _ex("diamondPushUp", "Diamond Push-Up", P.HORIZONTAL_PUSH, ("bodyweight",), ("triceps", "chest")),
    _ex("chestDip", "Dip", P.HORIZONTAL_PUSH, ("bodyweight",), ("chest", "triceps"), pr_key="weightedDip"),
    _ex("machineChestPress", "Machine Chest Press", P.HORIZONTAL_PUSH, ("machine",), ("chest", "triceps", "shoulders")),
    _ex("machineInclinePress", "Machine Incline Press", P.HORIZONTAL_PUSH, ("machine",), ("chest", "shoulders")),
    _ex("smithBenchPress", "Smith Machine Bench Press", P.HORIZONTAL_PUSH, ("machine",), ("chest", "triceps", "shoulders")),
    _ex("cableChestPress", "Cable Chest Press", P.HORIZONTAL_PUSH, ("cable",), ("chest", "triceps")),
    _ex("chestFly", "Dumbbell Chest Fly", P.HORIZONTAL_PUSH, ("dumbbell", "bench"), ("chest",)),
    _ex("inclineChestFly", "Incline Dumbbell Fly", P.HORIZONTAL_PUSH, ("dumbbell", "bench"), ("chest",)),
    _ex("cableFly", "Cable Fly", P.HORIZONTAL_PUSH, ("cable",), ("chest",)),
    _ex("pecDeck", "Pec Deck Machine", P.HORIZONTAL_PUSH, ("machine",), ("chest",)),
    _ex("barbellRow", "Barbell Row", P.HORIZONTAL_PULL, ("barbell",), ("back", "biceps")),
    _ex("pendlayRow", "Pendlay Row", P.HORIZONTAL_PULL, ("barbell",), ("back", "biceps")),
    _ex("tBarRow", "T-Bar Row", P.HORIZONTAL_PULL, ("barbell",), ("back", "biceps")),
    _ex("dbRow", "DB Row", P.HORIZONTAL_PULL, ("dumbbell", "bench"), ("back", "biceps")),
    _ex("meadowsRow", "Meadows Row", P.HORIZONTAL_PULL, ("barbell",), ("back", "biceps")),
    _ex("cableRow", "Cable Row", P.HORIZONTAL_PULL, ("cable",), ("back", "biceps")),
    _ex("wideGripCableRow", "Wide Grip Cable Row", P.HORIZONTAL_PULL, ("cable",), ("back", "rear delts")),
    _ex("chestSupportedRow", "Chest Supported Row", P.HORIZONTAL_PULL, ("dumbbell", "bench"), ("back",)),
    _ex("machineRow", "Machine Row", P.HORIZONTAL_PULL, ("machine",), ("back", "biceps")),
    _ex("hammerStrengthRow", "Hammer Strength Row", P.HORIZONTAL_PULL, ("machine",), ("back", "biceps")),
    _ex("invertedRow", "Inverted Row", P.HORIZONTAL_PULL, ("bodyweight", "pullupBar"), ("back", "biceps")),
    _ex("sealRow", "Seal Row", P.HORIZONTAL_PULL, ("dumbbell", "bench"), ("back",)),
    _ex("overheadPress", "Overhead Press", P.VERTICAL_PUSH, ("barbell",), ("shoulders", "triceps"), pr_key="overheadPress"),
    _ex("seatedOHP", "Seated Overhead Press", P.VERTICAL_PUSH, ("barbell", "bench"), ("shoulders", "triceps")),
    _ex("dbShoulderPress", "DB Shoulder Press", P.VERTICAL_PUSH, ("dumbbell",), ("shoulders", "triceps")),
    _ex("seatedDbShoulderPress", "Seated DB Shoulder Press", P.VERTICAL_PUSH, ("dumbbell", "bench"), ("shoulders", "triceps")),
    _ex("pushPress", "Push Press", P.VERTICAL_PUSH, ("barbell",), ("shoulders", "triceps", "legs")),
    _ex("arnoldPress", "Arnold Press", P.VERTICAL_PUSH, ("dumbbell",), ("shoulders",)),
    _ex("pikePushUp", "Pike Push-Up", P.VERTICAL_PUSH, ("bodyweight",), ("shoulders", "triceps")),
    _ex("handstandPushUp", "Handstand Push-Up", P.VERTICAL_PUSH, ("bodyweight",), ("shoulders", "triceps")),
    _ex("machineShoulderPress", "Machine Shoulder Press", P.VERTICAL_PUSH, ("machine",), ("shoulders", "triceps")),
    _ex("smithShoulderPress", "Smith Machine Shoulder Press", P.VERTICAL_PUSH, ("machine",), ("shoulders", "triceps")),
    _ex("landminePress", "Landmine Press", P.VERTICAL_PUSH, ("barbell",), ("shoulders", "chest")),
    _ex("lateralRaise", "Lateral Raise", P.VERTICAL_PUSH, ("dumbbell",), ("shoulders",)),
    _ex("cableLateralRaise", "Cable Lateral Raise", P.VERTICAL_PUSH, ("cable",), ("shoulders",)),
    _ex("machineLateralRaise", "Machine Lateral Raise", P.VERTICAL_PUSH, ("machine",), ("shoulders",)),
    _ex("frontRaise", "Front Raise", P.VERTICAL_PUSH, ("dumbbell",), ("shoulders",)),
    _ex("pullUp", "Pull-Up", P.VERTICAL_PULL, ("pullupBar",), ("back", "biceps"), pr_key="weightedPullUp"),
    _ex("chinUp", "Chin-Up", P.VERTICAL_PULL, ("pullupBar",), ("back", "biceps")),
    _ex("neutralGripPullUp", "Neutral Grip Pull-Up", P.VERTICAL_PULL, ("pullupBar",), ("back", "biceps")),
    _ex("wideGripPullUp", "Wide Grip Pull-Up", P.VERTICAL_PULL, ("pullupBar",), ("back", "biceps")),
    _ex("latPulldown", "Lat Pulldown", P.VERTICAL_PULL, ("cable",), ("back", "biceps")),
    _ex("closeGripPulldown", "Close Grip Pulldown", P.VERTICAL_PULL, ("cable",), ("back", "biceps")),
    _ex("wideGripPulldown", "Wide Grip Pulldown", P.VERTICAL_PULL, ("cable",), ("back",)),
    _ex("straightArmPulldown", "Straight Arm Pulldown", P.VERTICAL_PULL, ("cable",), ("back",)),
    _ex("assistedPullUp", "Assisted Pull-Up", P.VERTICAL_PULL, ("machine", "bands"), ("back", "biceps")),
    _ex("machinePullover", "Machine Pullover", P.VERTICAL_PULL, ("machine",), ("back", "chest")),
    _ex("farmerCarry", "Farmer's Carry", P.CARRY, ("dumbbell", "kettlebell"), ("grip", "core", "traps")),
    _ex("suitcaseCarry", "Suitcase Carry", P.CARRY, ("dumbbell", "kettlebell"), ("core", "grip")),
    _ex("overheadCarry", "Overhead Carry", P.CARRY, ("dumbbell", "kettlebell"), ("shoulders", "core")),
    _ex("rackCarry", "Rack Carry", P.CARRY, ("kettlebell",), ("core", "shoulders")),
    _ex("ruckMarch", "Ruck March", P.CARRY, ("none",), ("legs", "core", "back")),
    _ex("sandbagCarry", "Sandbag Carry", P.CARRY, ("none",), ("full body",)),
    _ex("trapBarCarry", "Trap Bar Carry", P.CARRY, ("trapBar",), ("grip", "traps", "core")),
    _ex("yoke_walk", "Yoke Walk", P.CARRY, ("none",), ("full body",)),
    _ex("plank", "Plank", P.CORE, ("bodyweight",), ("core",)),
    _ex("sidePlank", "Side Plank", P.CORE, ("bodyweight",), ("core", "obliques")),
    _ex("deadBug", "Dead Bug", P.CORE, ("bodyweight",), ("core",)),
    _ex("birdDog", "Bird Dog", P.CORE, ("bodyweight",), ("core", "back")),
    _ex("pallofPress", "Pallof Press", P.CORE, ("cable", "bands"), ("core", "obliques")),
    _ex("hangingLegRaise", "Hanging Leg Raise", P.CORE, ("pullupBar",), ("core",)),
    _ex("hangingKneeRaise", "Hanging Knee Raise", P.CORE, ("pullupBar",), ("core",)),
    _ex("abWheel", "Ab Wheel Rollout", P.CORE, ("none",), ("core",)),
    _ex("cableCrunch", "Cable Crunch", P.CORE, ("cable",), ("core",)),
    _ex("cableWoodchop", "Cable Woodchop", P.CORE, ("cable",), ("core", "obliques")),
    _ex("russianTwist", "Russian Twist", P.CORE, ("bodyweight", "dumbbell"), ("core", "obliques")),
    _ex("legRaise", "Leg Raise", P.CORE, ("bodyweight",), ("core",)),
    _ex("sitUp", "Sit-Up", P.CORE, ("bodyweight",), ("core",)),
    _ex("crunch", "Crunch", P.CORE, ("bodyweight",), ("core",)),
    _ex("machineCrunch", "Machine Crunch", P.CORE, ("machine",), ("core",)),
    _ex("declineSitUp", "Decline Sit-Up", P.CORE, ("bench",), ("core",)),
    _ex("facePull", "Face Pull", P.ACCESSORY, ("cable", "bands"), ("rear delts", "rotator cuff")),
    _ex("rearDeltFly", "Rear Delt Fly", P.ACCESSORY, ("dumbbell",), ("rear delts",)),
    _ex("reversePecDeck", "Reverse Pec Deck", P.ACCESSORY, ("machine",), ("rear delts",)),
    _ex("cableRearDeltFly", "Cable Rear Delt Fly", P.ACCESSORY, ("cable",), ("rear delts",)),
    _ex("barbellCurl", "Barbell Curl", P.ACCESSORY, ("barbell",), ("biceps",)),
    _ex("ezBarCurl", "EZ Bar Curl", P.ACCESSORY, ("barbell",), ("biceps",)),
    _ex("dumbbellCurl", "Dumbbell Curl", P.ACCESSORY, ("dumbbell",), ("biceps",)),
    _ex("hammerCurl", "Hammer Curl", P.ACCESSORY, ("dumbbell",), ("biceps", "forearms")),
    _ex("inclineCurl", "Incline Dumbbell Curl", P.ACCESSORY, ("dumbbell", "bench"), ("biceps",)),
    _ex("preacherCurl", "Preacher Curl", P.ACCESSORY, ("barbell", "dumbbell"), ("biceps",)),
    _ex("machinePreacherCurl", "Machine Preacher Curl", P.ACCESSORY, ("machine",), ("biceps",)),
    _ex("cableCurl", "Cable Curl", P.ACCESSORY, ("cable",), ("biceps",)),
    _ex("concentrationCurl", "Concentration Curl", P.ACCESSORY, ("dumbbell",), ("biceps",)),
    _ex("spiderCurl", "Spider Curl", P.ACCESSORY, ("dumbbell", "barbell"), ("biceps",)),
    _ex("tricepPushdown", "Tricep Pushdown", P.ACCESSORY, ("cable",), ("triceps",)),
    _ex("ropeTriPushdown", "Rope Tricep Pushdown", P.ACCESSORY, ("cable",), ("triceps",)),
    _ex("overheadTricepExtension", "Overhead Tricep Extension", P.ACCESSORY, ("dumbbell", "cable"), ("triceps",)),
    _ex("skullCrusher", "Skull Crusher", P.ACCESSORY, ("barbell", "dumbbell"), ("triceps",)),
    _ex("tricepKickback", "Tricep Kickback", P.ACCESSORY, ("dumbbell", "cable"), ("triceps",)),
    _ex("machineTricepDip", "Machine Tricep Dip", P.ACCESSORY, ("machine",), ("triceps",)),
    _ex("benchDip", "Bench Dip", P.ACCESSORY, ("bench",), ("triceps",)),
    _ex("wristCurl", "Wrist Curl", P.ACCESSORY, ("dumbbell", "barbell"), ("forearms",)),
    _ex("reverseWristCurl", "Reverse Wrist Curl", P.ACCESSORY, ("dumbbell", "barbell"), ("forearms",)),
    _ex("farmerHold", "Farmer Hold", P.ACCESSORY, ("dumbbell", "kettlebell"), ("grip", "forearms")),
    _ex("deadHang", "Dead Hang", P.ACCESSORY, ("pullupBar",), ("grip", "shoulders")),
    _ex("plateHold", "Plate Pinch Hold", P.ACCESSORY, ("none",), ("grip",)),
    _ex("standingCalfRaise", "Standing Calf Raise", P.ACCESSORY, ("machine",), ("calves",)),
    _ex("seatedCalfRaise", "Seated Calf Raise", P.ACCESSORY, ("machine",), ("calves",)),
    _ex("legPressCalfRaise", "Leg Press Calf Raise", P.ACCESSORY, ("machine",), ("calves",)),
    _ex("singleLegCalfRaise", "Single Leg Calf Raise", P.ACCESSORY, ("bodyweight",), ("calves",)),
    _ex("legExtension", "Leg Extension", P.ACCESSORY, ("machine",), ("quads",)),
    _ex("legCurl", "Lying Leg Curl", P.ACCESSORY, ("machine",), ("hamstrings",)),
    _ex("seatedLegCurl", "Seated Leg Curl", P.ACCESSORY, ("machine",), ("hamstrings",)),
    _ex("hipAbductor", "Hip Abductor Machine", P.ACCESSORY, ("machine",), ("glutes", "abductors")),
    _ex("hipAdductor", "Hip Adductor Machine", P.ACCESSORY, ("machine",), ("adductors",)),
    _ex("chestPressMachine", "Chest Press Machine", P.HORIZONTAL_PUSH, ("machine",), ("chest", "triceps", "shoulders")),
    _ex("converging_chest_press", "Converging Chest Press", P.HORIZONTAL_PUSH, ("machine",), ("chest", "triceps")),
    _ex("run", "Run", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("treadmill", "Treadmill", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("hike", "Hike", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("ruckHike", "Ruck Hike", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("bike", "Bike", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("assaultBike", "Assault Bike", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("spinBike", "Spin Bike", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("rowErg", "Row Erg", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("skiErg", "Ski Erg", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("swim", "Swim", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("stairClimber", "Stair Climber", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("elliptical", "Elliptical", P.CARDIO, ("cardioMachine",), (), is_cardio=True),
    _ex("jumpRope", "Jump Rope", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("battleRopes", "Battle Ropes", P.CARDIO, ("none",), (), is_cardio=True),
    _ex("boxJumps", "Box Jumps", P.CARDIO, ("box",), (), is_cardio=True),
    _ex("burpees", "Burpees", P.CARDIO, ("bodyweight",), (), is_cardio=True),
    _ex("mountainClimbers", "Mountain Climbers", P.CARDIO, ("bodyweight",), (), is_cardio=True),
    _ex("pigeonPose", "Pigeon Pose", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("worldsGreatestStretch", "World's Greatest Stretch", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("catCow", "Cat-Cow", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("thoracicRotation", "Thoracic Rotation", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("hipFlexorStretch", "Hip Flexor Stretch", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("couch_stretch", "Couch Stretch", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("downwardDog", "Downward Dog", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("childsPose", "Child's Pose", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("ankleCircles", "Ankle Circles", P.MOBILITY, ("bodyweight",), (), is_mobility=True),
    _ex("shoulderDislocates", "Shoulder Dislocates", P.MOBILITY, ("bands",), (), is_mobility=True),
    _ex("foamRoll", "Foam Rolling", P.MOBILITY, ("none",), (), is_mobility=True),
    _ex("lacrosseBall", "Lacrosse Ball Release", P.MOBILITY, ("none",), (), is_mobility=True),
)
