import mediapipe as mp

from airink.core.gestures import to_landmark_frame


class HandTracker:
    def __init__(self, detection_conf=0.7, tracking_conf=0.5):
        self.hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=0,  # 0=Faster/Lite, 1=Default. Using 0 for smoother FPS
            min_detection_confidence=detection_conf,
            min_tracking_confidence=tracking_conf,
        )

    def detect(self, frame):
        """Returns the 21 landmarks of the tracked hand, or None."""
        rgb = frame[:, :, ::-1]
        results = self.hands.process(rgb)
        if results.multi_hand_landmarks:
            return to_landmark_frame(results.multi_hand_landmarks[0])
        return None

    def close(self):
        self.hands.close()
